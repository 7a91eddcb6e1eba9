"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from bevelkit.main import app
from tests.conftest import RECT_PATH


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["presetsRegistered"] == 6


# ─── Panel ───────────────────────────────────────────────────────────────────


def test_panel_plain():
    response = client.post("/api/panel", json={"width": 100, "height": 50})
    assert response.status_code == 200
    data = response.json()
    assert data["fillPath"] == RECT_PATH
    assert data["shapePath"] == RECT_PATH
    assert data["padding"] == {
        "paddingTop": 1,
        "paddingRight": 1,
        "paddingBottom": 1,
        "paddingLeft": 1,
        "padding": 3,
    }
    assert data["stepBounds"] == {"top": 0, "right": 0, "bottom": 0, "left": 0}
    assert data["shapeTransform"] == "translate(0, 0)"
    assert data["bounds"] == [0, 0, 100, 50]
    assert data["area"] == 5000


def test_panel_bevel_camel_case():
    response = client.post(
        "/api/panel",
        json={
            "width": 100,
            "height": 50,
            "bevelConfig": {"topLeft": {"bevelSize": 10, "bevelAngle": 45}},
        },
    )
    assert response.status_code == 200
    assert response.json()["fillPath"].startswith("M 7.07 0")


def test_panel_steps_and_stroke():
    response = client.post(
        "/api/panel",
        json={
            "width": 100,
            "height": 60,
            "stepsConfig": {"top": {"segments": [{"start": 0.25, "end": 0.75, "height": 10}]}},
            "strokeWidth": "2px",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["strokeWidth"] == 2
    assert data["stepBounds"]["top"] == 10
    assert data["innerRect"] == {"x": 0, "y": 10, "width": 100, "height": 50}
    assert data["shapeTransform"] == "translate(0, 10)"
    assert data["borderViewBox"] == "-1 -1 102 62"
    assert data["fillPath"].count("L") == 7


def test_panel_precision():
    response = client.post(
        "/api/panel",
        json={"width": 100, "height": 50, "precision": 3, "bevelConfig": {"topLeft": {"bevelSize": 10}}},
    )
    assert response.json()["fillPath"].startswith("M 7.071 0")


def test_panel_infinite_stroke_width():
    response = client.post("/api/panel", json={"width": 100, "height": 50, "strokeWidth": "1e999px"})
    assert response.status_code == 200
    data = response.json()
    assert data["strokeWidth"] == 0
    assert data["borderViewBox"] == "0 0 100 50"


def test_panel_invalid_payload():
    response = client.post("/api/panel", json={"width": "wide", "height": 50})
    assert response.status_code == 422


def test_panel_svg():
    response = client.post(
        "/api/panel/svg",
        json={
            "width": 100,
            "height": 50,
            "strokeWidth": 2,
            "styleConfig": {
                "background": {"default": {"fill": "#111"}, "hover": {"fill": "#222"}},
                "border": {"default": {"stroke": "$primary"}},
            },
            "theme": {"primary": "#0ff"},
            "isHovered": True,
            "title": "Launch",
        },
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    body = response.text
    assert 'fill="#222"' in body
    assert 'stroke="#0ff"' in body
    assert "<title>Launch</title>" in body


# ─── Shadow ──────────────────────────────────────────────────────────────────


def test_shadow_viewport_center():
    response = client.post("/api/shadow", json={"elementRect": {"x": 0, "y": 0, "width": 0, "height": 0}})
    assert response.status_code == 200
    data = response.json()
    assert data["offset"] == {"x": -20, "y": -20}
    assert data["filter"] == "drop-shadow(-20px -20px 2.5px rgba(0, 0, 0, 0.35))"


def test_shadow_point_target():
    response = client.post(
        "/api/shadow",
        json={
            "elementRect": {"x": 10, "y": 10, "width": 20, "height": 20},
            "maxShadowDistance": 15,
            "target": {"x": 20, "y": 20},
        },
    )
    assert response.json()["offset"] == {"x": 0, "y": 0}


def test_shadow_percent_target():
    response = client.post(
        "/api/shadow",
        json={
            "elementRect": {"x": 200, "y": 100},
            "viewport": {"width": 200, "height": 200},
            "maxShadowDistance": 10,
            "target": {"percentX": 0.5, "percentY": 0.5},
        },
    )
    assert response.json()["offset"] == {"x": 10, "y": 0}


# ─── Presets ─────────────────────────────────────────────────────────────────


def test_list_presets():
    response = client.get("/api/presets")
    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert names == sorted(names)
    assert "button-tabbed" in names


def test_list_presets_by_tag():
    response = client.get("/api/presets", params={"tag": "container"})
    assert [p["name"] for p in response.json()] == ["card", "panel"]


def test_get_preset():
    response = client.get("/api/presets/card")
    assert response.status_code == 200
    data = response.json()
    assert data["strokeWidth"] == "1px"
    assert data["shape"]["bevelConfig"]["topLeft"]["bevelSize"] == 12


def test_unknown_preset():
    response = client.get("/api/presets/nope")
    assert response.status_code == 404


def test_shadow_infinite_distance():
    response = client.post(
        "/api/shadow",
        content='{"elementRect": {"x": 0, "y": 0, "width": 10, "height": 10}, "maxShadowDistance": 1e999}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["offset"] == {"x": 0, "y": 0}
