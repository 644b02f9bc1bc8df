import os

from supabase import Client, create_client


class SupabaseNotConfiguredError(Exception):
    pass


def get_supabase() -> Client:
    """
    Supabase client from env.

    Requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_ANON_KEY).
    Read per call so a freshly loaded .env is honored.
    """
    url = (os.getenv("SUPABASE_URL") or "").strip()
    key = (os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "").strip()

    if not url or not key:
        raise SupabaseNotConfiguredError(
            "Supabase not configured: set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_ANON_KEY)."
        )
    return create_client(url, key)
