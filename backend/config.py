import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Players created when a session starts or is reset
    DEFAULT_ROSTER_SIZE = int(os.environ.get('DEFAULT_ROSTER_SIZE', '2'))
    # strftime pattern for event log timestamps
    LOG_TIME_FORMAT = os.environ.get('LOG_TIME_FORMAT', '%I:%M:%S %p')
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',')
        if origin.strip()
    ]
