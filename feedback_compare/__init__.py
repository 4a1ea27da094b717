"""Compare learner feedback from two teaching periods with Gemini and render the report."""

__version__ = "0.1.0"
