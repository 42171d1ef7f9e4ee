"""HTTP service exposing event contracts and validation"""
from .app import create_app
from .config import Settings, get_settings
