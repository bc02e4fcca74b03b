from inventory_backend.testing import (  # noqa: F401
    app,
    app_settings,
    async_session,
    auth_headers,
    client,
)
