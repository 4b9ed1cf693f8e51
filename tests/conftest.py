"""
Pytest configuration shared by all test modules.

Registers the Hypothesis profile used by the property-based tests.
"""

from hypothesis import settings, Verbosity


# Configure Hypothesis for property-based testing
settings.register_profile("validation",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None
)
settings.load_profile("validation")
