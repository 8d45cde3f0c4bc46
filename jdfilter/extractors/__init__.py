from jdfilter.extractors.fields import extract_company, extract_title
from jdfilter.extractors.location import classify_location, collect_location_hints, is_remote
from jdfilter.extractors.orchestrator import TextSources, extract_job_descriptor
from jdfilter.extractors.tech_stack import (
    MATCH_RULES,
    MatchRule,
    build_pattern,
    collect_structured_keywords,
    match_tech_stacks,
)

__all__ = [
    "extract_title",
    "extract_company",
    "classify_location",
    "collect_location_hints",
    "is_remote",
    "TextSources",
    "extract_job_descriptor",
    "MATCH_RULES",
    "MatchRule",
    "build_pattern",
    "collect_structured_keywords",
    "match_tech_stacks",
]
