"""
Web 진입점

실행 방법:
    python -m web

바인드 주소/포트는 config/secrets.yaml의 web.host / web.port
(없으면 127.0.0.1:3000).
"""

import uvicorn

from core.config.loader import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "web.app:app",
        host=settings.web_host,
        port=settings.web_port,
        reload=False,
    )
