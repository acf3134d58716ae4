"""UI page routes."""

from flask import Blueprint, render_template

pages_bp = Blueprint('pages', __name__)


@pages_bp.route('/', methods=['GET'])
def index():
    """Render the blog URL form."""
    return render_template('index.html')
