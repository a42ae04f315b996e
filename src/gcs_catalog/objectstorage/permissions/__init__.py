"""Bucket access verification."""

from .bucket_access import verify_bucket_access

__all__ = ["verify_bucket_access"]
