import logging

import demo

def test_demo_run_ends_with_one_outrageous(tmp_path, monkeypatch, clean_logger, caplog) -> None:
    monkeypatch.chdir(tmp_path)
    caplog.set_level(logging.INFO, logger="cartshop")

    me = demo.main()

    assert me.name == "Matt"
    assert [item.name for item in me.cart] == ["Outrageous"]
    totals = [r.getMessage() for r in caplog.records if r.getMessage().startswith("The cart total is")]
    assert totals == [
        "The cart total is $5.99",
        "The cart total is $464.47",
        "The cart total is $0.00",
        "The cart total is $2.50",
    ]
