# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here ensures
# Base.metadata knows about every table before create_all runs.

from .base_class import Base

from .models.user_models import User, UserCredential
from .models.bio_models import GeneratedBio
