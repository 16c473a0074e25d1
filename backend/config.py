import os

class Config:
    # Werkzeug dev server switches for run.py; both off unless set
    DEBUG = os.environ.get('DEBUG', '0').lower() in ('1', 'true', 'yes')
    ALLOW_UNSAFE_WERKZEUG = os.environ.get('ALLOW_UNSAFE_WERKZEUG', '0').lower() in ('1', 'true', 'yes')
    # Listen address for the Socket.IO server (hosting platforms supply PORT)
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '8080'))
    # Comma separated list of origins allowed for HTTP and websocket traffic
    CORS_ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ALLOWED_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',')
        if origin.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
