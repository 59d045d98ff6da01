# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Run the TrainHub API server with ``python -m trainhub``.

Host, port and reload come from the API_ settings.
"""

import uvicorn

from trainhub.core.config import get_settings


def main() -> None:
    """Start uvicorn on the configured host and port."""
    api = get_settings().api
    uvicorn.run(
        "trainhub.api.app:create_app",
        factory=True,
        host=api.host,
        port=api.port,
        reload=api.reload,
    )


if __name__ == "__main__":
    main()
