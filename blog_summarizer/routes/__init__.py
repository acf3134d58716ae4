"""Routes package for the blog summarizer."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .pages import pages_bp
    from .summarize import summarize_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(summarize_bp, url_prefix='/api')
