from ad_lad.protocol import AdKind, ShowAdResult
from ad_lad.runtime.coordinator import AdLad

__all__ = ["AdKind", "AdLad", "ShowAdResult"]
