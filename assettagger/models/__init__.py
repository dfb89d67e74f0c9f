"""assettagger data models - all Pydantic v2, all frozen (immutable)."""

from assettagger.models.assets import AssetFile, AssetKind, AssetManifest, TaggedAsset
from assettagger.models.jobs import TaggingJob, TaggingReport

__all__ = [
    # assets
    "AssetKind",
    "AssetFile",
    "TaggedAsset",
    "AssetManifest",
    # jobs
    "TaggingJob",
    "TaggingReport",
]
