"""ViewModel package for UI state and command surfaces.

Call context:
    ``todocal/web_ui/main.py`` imports ``CalendarVM`` from this package to bind
    NiceGUI callbacks to state transitions.

Dependencies:
    Modules here depend on ``todocal.domain`` only. Rendering stays in the
    web UI package.
"""
