from tests.conftest import ISSUER, ATTENDEE1, ATTENDEE2, UNIT, auth_headers


def mint(client, identity=ATTENDEE1, payment=UNIT):
    return client.post("/tickets", json={"payment": payment}, headers=auth_headers(identity))


def test_event_endpoints(client):
    response = client.get("/event")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "MyConcert"
    assert body["symbol"] == "MC"
    assert body["max_price"] == 2 * UNIT
    assert body["issuer"] == ISSUER

    status = client.get("/event/status").json()
    assert status == {"supply_cap": 100, "minted_count": 0, "paused": False, "escrow_balance": 0}


def test_mint_requires_authentication(client):
    response = client.post("/tickets", json={"payment": UNIT})
    assert response.status_code == 401

    response = client.post(
        "/tickets", json={"payment": UNIT}, headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


def test_mint_and_query(client):
    response = mint(client)
    assert response.status_code == 201
    assert response.json() == {"ticket_id": 0}
    assert mint(client).json() == {"ticket_id": 1}

    ticket = client.get("/tickets/0").json()
    assert ticket["owner"] == ATTENDEE1
    assert ticket["price"] == UNIT
    assert ticket["for_sale"] is False
    assert ticket["used"] is False

    assert client.get("/tickets/0/owner").json() == {"ticket_id": 0, "owner": ATTENDEE1}
    assert client.get("/tickets/0/max-price").json()["max_price"] == 2 * UNIT

    holder = client.get(f"/holders/{ATTENDEE1}").json()
    assert holder == {"identity": ATTENDEE1, "balance": 2, "proceeds": 0}
    assert client.get(f"/holders/{ATTENDEE1}/tickets/0").json()["is_owner"] is True
    assert client.get(f"/holders/{ATTENDEE2}/tickets/0").json()["is_owner"] is False
    assert len(client.get(f"/holders/{ATTENDEE1}/tickets").json()) == 2


def test_rejections_carry_stable_messages(client):
    mint(client)

    response = mint(client, payment=UNIT - 1)
    assert response.status_code == 402
    assert response.json() == {"detail": "insufficient payment", "error": "InsufficientPayment"}

    response = client.post("/tickets/0/sale", headers=auth_headers(ATTENDEE2))
    assert response.status_code == 403
    assert response.json()["detail"] == "no permission"

    response = client.put(
        "/tickets/0/price", json={"price": 5 * UNIT}, headers=auth_headers(ATTENDEE1)
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "price must be lower than the maximum price"

    response = client.get("/tickets/42")
    assert response.status_code == 404
    assert response.json()["error"] == "TicketNotFound"


def test_supply_exhausted(client):
    mint(client)
    response = client.put("/admin/supply", json={"supply_cap": 1}, headers=auth_headers(ISSUER))
    assert response.status_code == 200

    response = mint(client, identity=ATTENDEE2)
    assert response.status_code == 400
    assert response.json()["detail"] == "no more new tickets available"


def test_resale_flow(client):
    mint(client)
    seller = auth_headers(ATTENDEE1)
    buyer = auth_headers(ATTENDEE2)

    assert client.put("/tickets/0/price", json={"price": 2 * UNIT}, headers=seller).status_code == 200
    assert client.post("/tickets/0/sale", headers=seller).status_code == 200
    assert client.post("/tickets/0/approval", json={"buyer": ATTENDEE2}, headers=seller).status_code == 200
    assert [t["id"] for t in client.get("/tickets", params={"for_sale": True}).json()] == [0]

    response = client.post("/tickets/0/purchase", json={"payment": 3 * UNIT}, headers=buyer)
    assert response.status_code == 402
    assert response.json()["error"] == "OverpaymentRejected"
    assert client.get("/tickets/0/owner").json()["owner"] == ATTENDEE1

    response = client.post("/tickets/0/purchase", json={"payment": 2 * UNIT}, headers=buyer)
    assert response.status_code == 200
    assert client.get("/tickets/0/owner").json()["owner"] == ATTENDEE2

    response = client.post("/escrow/proceeds/claim", headers=seller)
    assert response.json() == {"amount": 2 * UNIT - 2 * UNIT * 20 // 100}


def test_cancel_sale(client):
    mint(client)
    seller = auth_headers(ATTENDEE1)
    client.post("/tickets/0/sale", headers=seller)

    assert client.delete("/tickets/0/sale", headers=seller).status_code == 200
    assert client.get("/tickets/0").json()["for_sale"] is False


def test_mark_used_and_reject_listing(client):
    mint(client)

    response = client.post("/admin/tickets/0/used", headers=auth_headers(ATTENDEE1))
    assert response.status_code == 403

    assert client.post("/admin/tickets/0/used", headers=auth_headers(ISSUER)).status_code == 200
    assert client.get("/tickets/0").json()["used"] is True

    response = client.post("/tickets/0/sale", headers=auth_headers(ATTENDEE1))
    assert response.status_code == 400
    assert response.json()["detail"] == "ticket already used"


def test_destroy(client):
    mint(client)

    assert client.delete("/tickets/0", headers=auth_headers(ATTENDEE1)).status_code == 200
    assert client.get("/tickets/0/owner").status_code == 404
    assert client.get(f"/holders/{ATTENDEE1}").json()["balance"] == 0


def test_pause_blocks_minting(client):
    issuer = auth_headers(ISSUER)
    assert client.post("/admin/pause", headers=issuer).status_code == 200

    response = mint(client)
    assert response.status_code == 409
    assert response.json()["detail"] == "system paused"

    assert client.post("/admin/unpause", headers=issuer).status_code == 200
    assert mint(client).status_code == 201


def test_withdraw(client):
    mint(client)
    mint(client, identity=ATTENDEE2)

    response = client.post("/escrow/withdraw", headers=auth_headers(ATTENDEE1))
    assert response.status_code == 403

    issuer = auth_headers(ISSUER)
    assert client.post("/escrow/withdraw", headers=issuer).json() == {"amount": 2 * UNIT}
    assert client.post("/escrow/withdraw", headers=issuer).json() == {"amount": 0}
    assert client.get("/event/status").json()["escrow_balance"] == 0


def test_notifications_are_issuer_only(client):
    mint(client)

    assert client.get("/admin/notifications", headers=auth_headers(ATTENDEE1)).status_code == 403

    response = client.get("/admin/notifications", headers=auth_headers(ISSUER))
    assert response.status_code == 200
    assert [n["name"] for n in response.json()] == ["TicketCreated"]


def test_security_headers(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
