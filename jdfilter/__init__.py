"""JD-Filter - structured field extraction from job posting pages."""

from importlib import import_module

__all__ = [
    "JobDescriptor",
    "LocationResult",
    "HtmlDocument",
    "TechLexicon",
    "JobExtractionService",
    "extract_job_descriptor",
]

_EXPORT_TO_MODULE = {
    "JobDescriptor": "jdfilter.models.job",
    "LocationResult": "jdfilter.models.location",
    "HtmlDocument": "jdfilter.document",
    "TechLexicon": "jdfilter.lexicon.tech_lexicon",
    "JobExtractionService": "jdfilter.service",
    "extract_job_descriptor": "jdfilter.extractors.orchestrator",
}


def __getattr__(name: str):
    module_name = _EXPORT_TO_MODULE.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(module_name)
    value = getattr(module, name)
    globals()[name] = value
    return value
