"""Environment variable constants for the grab library.

This module centralizes the environment variable keys read by grab so they are
not hardcoded across modules.
"""

# Zero value configuration
GRAB_ZERO_VALUES = "GRAB_ZERO_VALUES"
"""Environment variable to override the zero value resolution strategy.
Set this to a fully qualified class name of a ZeroValues implementation.
Default: grab.zero.DefaultZeroValues
"""
