"""Home, help, about and catalog browsing routes."""

from xitzin import Request, Xitzin

from ..engine.commands import format_costs


def register_routes(app: Xitzin) -> None:
    """Register home routes."""

    @app.gemini("/", name="home")
    def home(request: Request):
        catalogs = request.app.state.catalogs
        return app.template(
            "home.gmi", games=[c.game for c in catalogs.values()]
        )

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template("help.gmi")

    @app.gemini("/about", name="about")
    def about(request: Request):
        return app.template("about.gmi")

    @app.gemini("/games/{game_id}", name="game")
    def game(request: Request, game_id: str):
        """Catalog grouped by category, plus the game's samples."""
        catalog = request.app.state.catalogs.get(game_id)
        if catalog is None:
            return app.template("missing.gmi", what=f"game '{game_id}'")
        return app.template(
            "game.gmi",
            game=catalog.game,
            groups=[
                (category or "Other", catalog.game.items_in(category))
                for category in catalog.game.categories()
            ],
            samples=list(catalog.samples.values()),
            format_costs=format_costs,
        )
