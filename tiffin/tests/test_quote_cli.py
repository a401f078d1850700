import json
import logging

from tiffin.main import log_level, main, quote


def test_quote_breakdown():
    breakdown = quote({"basePrice": 10, "deliveryCharge": 0, "discountAmount": 50})
    assert breakdown["final_amount"] == 0
    assert breakdown["total_before_discount"] == 10


def test_cli_prints_breakdown(tmp_path, capsys):
    order = tmp_path / "order.json"
    order.write_text(json.dumps({
        "basePrice": 100,
        "addOns": [{"price": 10, "quantity": 2}],
        "weeklyCustomizations": [{"price": 5, "days": ["Mon", "Wed"]}],
        "deliveryCharge": 20,
        "discountAmount": 15,
        "selectedDays": ["Mon"],
    }), encoding="utf-8")

    assert main([str(order)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["final_amount"] == 130
    assert out["subtotal"] == 125


def test_cli_rejects_invalid_selection(tmp_path, capsys):
    order = tmp_path / "order.json"
    order.write_text(json.dumps({"basePrice": -5}), encoding="utf-8")
    assert main([str(order)]) == 2
    assert "basePrice" in capsys.readouterr().err


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_cli_undecodable_file(tmp_path):
    order = tmp_path / "order.json"
    order.write_bytes(b'{"basePrice": "\xff\xfe"}')
    assert main([str(order)]) == 1


def test_cli_unknown_log_level_falls_back(tmp_path, monkeypatch, capsys):
    import tiffin.main as quote_main
    monkeypatch.setattr(quote_main, "LOG_LEVEL", "VERBOSE")
    monkeypatch.setattr(quote_main, "DEBUG", False)
    assert log_level() == logging.INFO
    order = tmp_path / "order.json"
    order.write_text(json.dumps({"basePrice": 40}), encoding="utf-8")
    assert main([str(order)]) == 0
    assert json.loads(capsys.readouterr().out)["final_amount"] == 40
