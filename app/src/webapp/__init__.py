from webapp.app import create_app
from webapp.state import AppState

__all__ = ['AppState', 'create_app']
