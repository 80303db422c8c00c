"""a11y_checker.core: foundation layer.

Contains the colour model, luminance/contrast maths, contrast and touch-target
policies, the accessibility descriptor builder, the screen-reader number
formatter, and the theme parser and report builder used by the CLI.
This module has NO dependencies on a11y_checker.checks or a11y_checker.registry.
Only stdlib, numpy, PIL and babel are allowed here.
"""
