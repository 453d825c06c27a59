"""
Tests for the HTML pages.
"""


def test_home_page(client):
    r = client.get("/")

    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "Your Trusted Property Acquisition Partner" in r.text
    assert 'data-role="contact"' in r.text
    assert "/api/contact" in r.text
    assert "Frequently Asked Questions" in r.text


def test_features_placeholder(client):
    r = client.get("/features")
    assert r.status_code == 200
    assert "Content coming soon..." in r.text


def test_portfolio_empty(client):
    r = client.get("/portfolio")
    assert r.status_code == 200
    assert "No properties yet" in r.text


def test_portfolio_lists_properties(client, write_property):
    write_property("maple", "A **great** duplex.", title="Maple Duplex", location="Austin")
    write_property("oak", "Corner lot.", title="Oak <Corner>")

    r = client.get("/portfolio")

    assert "Maple Duplex" in r.text
    assert 'href="/portfolio/maple"' in r.text
    assert "Oak &lt;Corner&gt;" in r.text


def test_property_detail(client, write_property):
    write_property("maple", "A **great** duplex.", title="Maple Duplex", units=2)

    r = client.get("/portfolio/maple")

    assert r.status_code == 200
    assert "<strong>great</strong>" in r.text
    assert "Units" in r.text


def test_property_detail_not_found(client):
    r = client.get("/portfolio/missing")
    assert r.status_code == 404
    assert "Property not found" in r.text


def test_property_detail_shows_extra_metadata(client, write_property):
    write_property("maple", "Body", title="Maple Duplex", neighborhood='"Hyde <Park>"')

    r = client.get("/portfolio/maple")

    assert "More details" in r.text
    assert "neighborhood" in r.text
    assert "Hyde &lt;Park&gt;" in r.text


def test_property_detail_without_extra_metadata(client, write_property):
    write_property("oak", "Body", title="Oak")

    assert "More details" not in client.get("/portfolio/oak").text
