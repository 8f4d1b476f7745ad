"""
Benchmark suite for jstream decoding performance.

Compares jstream against other JSON decoders:
- Python standard library json
- orjson (Rust-backed)
- ujson (C-backed)

Measures decoding speed and peak memory across document shapes, including
jstream's streaming path over binary file objects.
"""
