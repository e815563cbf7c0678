# server_env/api_error/__init__.py
from .config_error import *
