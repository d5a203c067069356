"""
Páginas - Blueprint con una ruta por pantalla
"""
from flask import Blueprint

pages = Blueprint('pages', __name__)

# Import de las rutas tras crear el blueprint
from . import auth, dashboard, categories, items, movements
