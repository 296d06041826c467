"""Line sources for Documents."""

from file_viewer.io.reader import load, load_text, split_lines

__all__ = ["load", "load_text", "split_lines"]
