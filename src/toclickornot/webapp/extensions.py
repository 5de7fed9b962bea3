"""Flask extensions, created unbound and initialised in create_app."""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
