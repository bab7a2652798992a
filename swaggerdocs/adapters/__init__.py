"""
Adapters — the renderer and formatter capabilities the generator calls.

The generator only talks to these through the base protocols, never
directly to a concrete renderer or to gofmt.
"""
