"""
Shared fixtures for building model instances and throwaway Rails projects on disk.
"""

from pathlib import Path

import pytest

from core.models import Binding, ControllerDescriptor, TargetRef, ValueRef

PRESENCE_CONTROLLER = """\
import { Controller } from "@hotwired/stimulus"

export default class extends Controller {
  static targets = ["list"]
  static values = { fadeMs: Number }

  highlight() {}
}
"""

PRESENCE_VIEW = """\
<div id="presence"
     data-controller="presence"
     data-action="turbo:before-stream-render->presence#highlight"
     data-presence-target="list"
     data-presence-fade-ms-value="250">
  <ul data-presence-targets="item list">
    <li>Item 1</li>
    <li>Item 2</li>
  </ul>
</div>
"""


@pytest.fixture
def rails_project(tmp_path):
    """
    Factory writing controllers and views under a fresh project root.

    Usage:
        root = rails_project(
            controllers={"test_controller.js": "..."},
            views={"test/index.html.erb": "<div data-controller='test'></div>"},
        )
    """

    def _factory(
        controllers: dict[str, str] | None = None,
        views: dict[str, str] | None = None,
    ) -> Path:
        root = tmp_path / "project"
        controllers_dir = root / "app" / "javascript" / "controllers"
        views_dir = root / "app" / "views"
        controllers_dir.mkdir(parents=True, exist_ok=True)
        views_dir.mkdir(parents=True, exist_ok=True)

        for name, content in (controllers or {}).items():
            path = controllers_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        for name, content in (views or {}).items():
            path = views_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        return root

    return _factory


@pytest.fixture
def presence_project(rails_project):
    """Project with a `presence` controller and a view exercising every attribute family."""
    return rails_project(
        controllers={"presence_controller.js": PRESENCE_CONTROLLER},
        views={"home/index.html.erb": PRESENCE_VIEW},
    )


@pytest.fixture
def binding_factory():
    """Factory for creating Binding instances with sensible defaults."""
    counter = {"n": 0}

    def _factory(
        controllers=None,
        actions=None,
        targets=None,
        values=None,
        selector=None,
    ) -> Binding:
        counter["n"] += 1
        return Binding(
            id=f"el_{counter['n']:04d}",
            selector=selector or f"app/views/test.html.erb:{counter['n']} <div...>",
            controllers=list(controllers or []),
            actions=list(actions or []),
            targets=[TargetRef(c, n) for c, n in (targets or [])],
            values=[ValueRef(c, n, v) for c, n, v in (values or [])],
        )

    return _factory


@pytest.fixture
def controller_factory():
    """Factory for ControllerDescriptor instances."""

    def _factory(name: str) -> ControllerDescriptor:
        file_name = name.replace("-", "_") + "_controller.js"
        return ControllerDescriptor(name, f"app/javascript/controllers/{file_name}")

    return _factory
