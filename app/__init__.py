"""DevVault notification service.

Layers follow the usual split: ``domain`` holds plain entities,
``application`` the use cases, ``infrastructure`` persistence and realtime
delivery, and ``interfaces`` the HTTP and websocket surface.
"""
