"""Core gameplay primitives (board helpers and the round engine).

Kept free of FastAPI and network concerns so it can be driven by the session
controller, scripts, and tests alike.
"""
