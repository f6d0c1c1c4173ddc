from slicekit.slices.metadata import BlobMetadataSlice

__all__ = ["BlobMetadataSlice"]
