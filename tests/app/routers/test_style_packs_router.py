"""Tests for style packs router."""

from uuid import uuid4


def test_list_style_packs(client, setup_style_pack, setup_inactive_style_pack):
    r = client.get("/style-packs")
    assert r.status_code == 200
    items = r.json()["items"]
    assert [p["id"] for p in items] == [str(setup_style_pack.id)]
    assert "system_prompt" not in items[0]


def test_purchase_style_pack(client, setup_style_pack):
    r = client.post(f"/style-packs/{setup_style_pack.id}/purchase")
    assert r.status_code == 201
    assert r.json()["style_pack_id"] == str(setup_style_pack.id)

    r2 = client.get("/style-packs/purchased")
    assert [p["style_pack_id"] for p in r2.json()["items"]] == [str(setup_style_pack.id)]


def test_purchase_twice_conflict(client, setup_style_pack):
    client.post(f"/style-packs/{setup_style_pack.id}/purchase")
    r = client.post(f"/style-packs/{setup_style_pack.id}/purchase")
    assert r.status_code == 409


def test_purchase_unknown_pack(client):
    r = client.post(f"/style-packs/{uuid4()}/purchase")
    assert r.status_code == 404


def test_purchase_inactive_pack(client, setup_inactive_style_pack):
    r = client.post(f"/style-packs/{setup_inactive_style_pack.id}/purchase")
    assert r.status_code == 404
