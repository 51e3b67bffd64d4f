"""Application tags – attribute chains, tag context and dispatch tables."""
from flag_tags.application.tags.attribute import Attribute
from flag_tags.application.tags.chain import AttributeChain, AttributeSegment, parse_attribute_chain
from flag_tags.application.tags.context import TagContext
from flag_tags.application.tags.dispatch import TagDispatchTable, TagHandler, resolve_tag

__all__ = [
    "Attribute",
    "AttributeChain",
    "AttributeSegment",
    "TagContext",
    "TagDispatchTable",
    "TagHandler",
    "parse_attribute_chain",
    "resolve_tag",
]
