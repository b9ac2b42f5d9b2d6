from app.services import inventory_service as inv


def test_list_joins_athlete_names(store, make_athlete, make_item) -> None:
    john = make_athlete("John", "Smith", hasUniform=True, uniformId="U1")
    make_item("U1", status="Checked Out", assigned_to=john)
    make_item("U2")

    items = inv.list_inventory(store)

    assert [i["itemId"] for i in items] == ["U1", "U2"]
    assert items[0]["assignedToName"] == "John Smith"
    assert items[1]["assignedToName"] is None


def test_list_leaves_name_empty_for_missing_athlete(store, make_item) -> None:
    make_item("U1", status="Checked Out", assigned_to="gone")

    items = inv.list_inventory(store)

    assert len(items) == 1
    assert items[0]["assignedTo"] == "gone"
    assert items[0]["assignedToName"] is None


def test_display_name_is_trimmed(store, make_athlete, make_item) -> None:
    solo = make_athlete("Cher", "")
    make_item("U1", status="Checked Out", assigned_to=solo)

    assert inv.list_inventory(store)[0]["assignedToName"] == "Cher"


def test_list_keeps_unknown_stored_fields(store, make_item) -> None:
    make_item("U1", barcode="0042", notes="left sleeve torn")

    item = inv.list_inventory(store)[0]

    assert item["barcode"] == "0042"
    assert item["notes"] == "left sleeve torn"


def test_list_athlete_items_returns_every_held_item(store, make_athlete, make_item) -> None:
    ada = make_athlete("Ada", "Runner", hasUniform=True, uniformId="U1")
    other = make_athlete("Bo", "Other")
    make_item("U1", status="Checked Out", assigned_to=ada)
    make_item("J1", status="Checked Out", assigned_to=ada)
    make_item("U2", status="Checked Out", assigned_to=other)
    make_item("U3")

    items = inv.list_athlete_items(store, ada)

    assert sorted(i["itemId"] for i in items) == ["J1", "U1"]
    assert {i["assignedToName"] for i in items} == {"Ada Runner"}


def test_empty_inventory(store) -> None:
    assert inv.list_inventory(store) == []
    assert inv.find_uniform_mismatches(store) == []


def test_audit_reasons(store, make_athlete, make_item) -> None:
    clean = make_athlete("Clean", "One", hasUniform=True, uniformId="C1")
    make_item("C1", status="Checked Out", assigned_to=clean)
    unflagged = make_athlete("Un", "Flagged")
    make_item("F1", status="Checked Out", assigned_to=unflagged)
    wrong_code = make_athlete("Wrong", "Code", hasUniform=True, uniformId="OLD")
    make_item("W1", status="Checked Out", assigned_to=wrong_code)
    orphan_item = make_item("O1", status="Checked Out", assigned_to="missing-athlete")

    by_athlete = {m["athleteId"]: m for m in inv.find_uniform_mismatches(store)}

    assert clean not in by_athlete
    assert by_athlete[unflagged]["reason"] == "holds items but is not marked as holding a uniform"
    assert by_athlete[wrong_code]["reason"] == "uniformId does not match any assigned item"
    assert by_athlete["missing-athlete"]["assignedItemIds"] == [orphan_item]
    assert by_athlete["missing-athlete"]["athleteName"] is None


def test_audit_does_not_write(store, make_athlete, read_doc) -> None:
    flagged = make_athlete(hasUniform=True, uniformId="U1")

    inv.find_uniform_mismatches(store)

    assert read_doc("athletes", flagged)["hasUniform"] is True


def test_available_items_exclude_assigned_and_other_statuses(store, make_athlete, make_item) -> None:
    ada = make_athlete(hasUniform=True, uniformId="U1")
    make_item("U1", status="Checked Out", assigned_to=ada)
    free = make_item("U2")
    make_item("U3", status="Maintenance")
    # Inconsistent legacy row: Available but still pointing at someone
    make_item("U4", status="Available", assigned_to=ada)

    items = inv.list_available_items(store)

    assert [i["id"] for i in items] == [free]
    assert items[0]["assignedToName"] is None


def test_items_needing_attention(store, make_athlete, make_item) -> None:
    ada = make_athlete("Ada", "Runner", hasUniform=True, uniformId="U2")
    poor = make_item("U1", condition="Poor")
    damaged = make_item("U2", status="Checked Out", assigned_to=ada, condition="Damaged")
    repair = make_item("U3", condition="Good", notes="Needs REPAIR on zip")
    replace = make_item("U4", notes="replace before meet")
    make_item("U5", condition="Good", notes="fine")
    make_item("U6")

    items = inv.list_items_needing_attention(store)

    assert [i["id"] for i in items] == [poor, damaged, repair, replace]
    assert items[1]["assignedToName"] == "Ada Runner"


def test_read_filters_over_http(client, auth_headers, make_item) -> None:
    free = make_item("U1")
    worn = make_item("U2", status="Maintenance", condition="Poor")

    r = client.get("/api/inventory/available", headers=auth_headers)
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == [free]

    r = client.get("/api/inventory/attention", headers=auth_headers)
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == [worn]
