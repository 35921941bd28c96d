"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, render_template, request

from lotto_checker.check_api import get_check_service
from lotto_checker.services.page_state import PageState
from lotto_checker.services.result_view import build_result_rows, build_winning_view
from lotto_checker.utils.responses import NO_STORE_HEADERS


web_bp = Blueprint("web", __name__)


def _render(state: PageState) -> Response:
    html = render_template(
        "index.html",
        state=state,
        winning=build_winning_view(state.winning_numbers),
        rows=build_result_rows(state.results),
    )
    return Response(html, headers=NO_STORE_HEADERS)


@web_bp.get("/")
def index():
    return _render(PageState(lotto_input=current_app.config["DEFAULT_LOTTO_INPUT"]))


@web_bp.post("/")
def check():
    """Form submission; errors are shown in the page, not as JSON."""

    state = PageState(lotto_input=request.form.get("lotto_input", ""))
    state.submit(get_check_service().submit)
    return _render(state)


@web_bp.get("/favicon.ico")
def favicon() -> Response:
    svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
    <radialGradient id='g' cx='35%' cy='30%' r='80%'>
        <stop offset='0%' stop-color='#facc15'/>
        <stop offset='60%' stop-color='#f97316'/>
        <stop offset='100%' stop-color='#7c2d12'/>
    </radialGradient>
    </defs>
    <circle cx='32' cy='32' r='28' fill='url(#g)'/>
    <text x='32' y='40' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='22' font-weight='800' fill='#ffffff'>&#10003;</text>
</svg>"""

    return Response(svg, mimetype="image/svg+xml")
