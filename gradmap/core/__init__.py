"""gradmap.core — Foundation layer.

Contains the stop parser, gradient sampler, LUT builder, pixel remapper,
and the thin adapters around them (fragment codec, preset store, preview
strip, report builder). This module has NO dependencies on
gradmap.commands or gradmap.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
