# backend/pagecraft/__init__.py
from .config import settings
from .database import Base
from . import models
from . import schemas
from . import storage
from . import fields
from . import forms
from . import editing

__version__ = "0.1.0"
