"""
Runner Tests
============
"""

import json

from variant_grouping.runner import main


def test_detect_prints_json(capsys):
    exit_code = main(["--detect", "GLOVE XL", "GLOVE S"])
    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["optionName"] == "Size"
    assert data["commonBaseName"] == "GLOVE"


def test_missing_input_file(tmp_path, capsys):
    exit_code = main(["--input", str(tmp_path / "missing.csv")])
    assert exit_code == 1
    assert "ERROR: Input file not found" in capsys.readouterr().out


def test_dry_run_writes_nothing(feed_csv, tmp_path, capsys):
    output_dir = tmp_path / "out"
    exit_code = main(["--input", str(feed_csv), "--output-dir", str(output_dir)])
    assert exit_code == 0
    out = capsys.readouterr().out
    assert "DRY-RUN COMPLETE" in out
    assert "PRIORITY GTX JACKET" in out
    assert not output_dir.exists()


def test_confirm_generates_files(feed_csv, tmp_path, capsys):
    output_dir = tmp_path / "out"
    exit_code = main(["--input", str(feed_csv), "--output-dir", str(output_dir), "--confirm", "-v"])
    assert exit_code == 0
    assert "GENERATION COMPLETE" in capsys.readouterr().out

    payloads = json.loads((output_dir / "product_payloads.json").read_text(encoding="utf-8"))
    assert len(payloads) == 4
    assert (output_dir / "variants.csv").exists()
    assert (output_dir / "analysis_report.md").exists()


def test_query_and_families_only(feed_csv, tmp_path, capsys):
    output_dir = tmp_path / "out"
    exit_code = main([
        "--input", str(feed_csv), "--output-dir", str(output_dir),
        "--query", "lens", "--families-only", "--confirm",
    ])
    assert exit_code == 0
    payloads = json.loads((output_dir / "product_payloads.json").read_text(encoding="utf-8"))
    assert [p["title"] for p in payloads] == ["LENS GRAND PRIX"]


def test_bad_columns(tmp_path, capsys):
    feed = tmp_path / "feed.csv"
    feed.write_text("Item,Name\n1,GRIPS\n", encoding="utf-8")
    assert main(["--input", str(feed)]) == 1
    assert "ERROR: Missing SKU column" in capsys.readouterr().out


def test_infinite_quantity_does_not_reject_feed(tmp_path, capsys):
    feed = tmp_path / "feed.csv"
    feed.write_text("Part no,DescriptionEN,Retail,qty\nA,GRIPS (S),1,3\nB,GRIPS (M),1,inf\n", encoding="utf-8")
    assert main(["--input", str(feed)]) == 0
    assert "GRIPS" in capsys.readouterr().out
