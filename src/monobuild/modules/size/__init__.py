"""Size report module."""

from monobuild.modules.size.report import gzip_size, report_size

__all__ = ["gzip_size", "report_size"]
