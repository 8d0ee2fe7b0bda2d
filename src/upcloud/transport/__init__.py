"""Transport layers for the UpCloud client.

Transport layers wrap an httpx transport (``httpx.AsyncHTTPTransport`` by
default) and are handed to ``httpx.AsyncClient(transport=...)``.

Modules:
    basic_auth: HTTP Basic authentication

Example:
    ```python
    from upcloud.transport import BasicAuthTransport

    transport = BasicAuthTransport.from_env()
    http_client = transport.client()
    ```
"""

from upcloud.transport.basic_auth import BasicAuthTransport, basic_auth_header

__all__ = ["BasicAuthTransport", "basic_auth_header"]
