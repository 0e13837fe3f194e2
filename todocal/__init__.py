"""Calendar-based todo manager: MVVM core plus a NiceGUI page."""

__version__ = "0.1.0"
