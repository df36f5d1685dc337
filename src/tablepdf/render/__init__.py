"""Rendering surfaces: ReportLab PDF output and placement recording.

Import from the submodules directly; the layout engine depends on
:mod:`tablepdf.render.surface`, so this package keeps no eager imports.
"""
