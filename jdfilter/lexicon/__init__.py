from jdfilter.lexicon.base_store import BaseLexiconStore, clean_labels
from jdfilter.lexicon.file_store import JsonFileLexiconStore
from jdfilter.lexicon.tech_lexicon import TechLexicon

__all__ = [
    "BaseLexiconStore",
    "clean_labels",
    "JsonFileLexiconStore",
    "TechLexicon",
    "build_lexicon_store",
]


def build_lexicon_store(settings) -> BaseLexiconStore:
    """Create the lexicon store selected by settings.lexicon_backend."""
    backend = settings.lexicon_backend.lower()
    if backend == "file":
        return JsonFileLexiconStore(settings.lexicon_path)
    if backend == "supabase":
        # Lazy import so file-backed deployments never initialise the client library
        from jdfilter.lexicon.supabase_store import SupabaseLexiconStore
        return SupabaseLexiconStore(
            settings.supabase_url,
            settings.supabase_key,
            table=settings.lexicon_table,
            lexicon_key=settings.lexicon_key,
        )
    raise ValueError(f"Unknown lexicon backend: {settings.lexicon_backend!r}")
