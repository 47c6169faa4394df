"""Sample-by-sample audio DSP building blocks: filters, envelopes, oscillators, effects and noise sources."""

__version__ = "0.1.0"