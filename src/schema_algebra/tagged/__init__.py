"""Tagged union codec engine exports."""

from .tagged_engine import (
    DEFAULT_DISCRIMINATOR,
    TaggedAlternative,
    TaggedCodec,
    choice_codec,
    invmap_tagged_codec,
    tagged_record_codec,
)

__all__ = [
    "DEFAULT_DISCRIMINATOR",
    "TaggedAlternative",
    "TaggedCodec",
    "choice_codec",
    "invmap_tagged_codec",
    "tagged_record_codec",
]
