from .detect_file import detect_file_bp
from .seasons import seasons_bp

__all__ = ["detect_file_bp", "seasons_bp"]
