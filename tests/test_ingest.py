from pageqa.pipeline import Pipeline
from pageqa.scripts import ingest


def _fake_build(seen):
    def build(settings):
        seen["settings"] = settings
        return Pipeline(
            fetch=lambda url: "<p>One. Two.</p>",
            clean=lambda html: "One. Two.",
            store=lambda chunks, source: len(chunks),
            answer=lambda query, source: "Two sentences.",
            max_chunk_size=settings.max_chunk_chars,
            overlap_size=settings.chunk_overlap_chars,
        )
    return build


def test_index_only(monkeypatch, capsys):
    seen = {}
    monkeypatch.setattr(ingest, "build_pipeline", _fake_build(seen))
    code = ingest.main(["--url", "https://example.com", "--max-chunk-size", "4", "--overlap-size", "0"])
    assert code == 0
    assert seen["settings"].max_chunk_chars == 4
    assert "stored 2 chunks" in capsys.readouterr().out


def test_with_query(monkeypatch, capsys):
    monkeypatch.setattr(ingest, "build_pipeline", _fake_build({}))
    assert ingest.main(["--url", "https://example.com", "--query", "How many?"]) == 0
    out = capsys.readouterr().out
    assert "Two sentences." in out


def test_failure_exit_code(monkeypatch):
    monkeypatch.setattr(ingest, "build_pipeline", _fake_build({}))
    assert ingest.main(["--url", "https://example.com", "--max-chunk-size", "0"]) == 1


def test_failure_is_logged_under_module_logger(monkeypatch, caplog):
    monkeypatch.setattr(ingest, "build_pipeline", _fake_build({}))
    with caplog.at_level("ERROR", logger="pageqa.scripts.ingest"):
        assert ingest.main(["--url", "https://example.com", "--max-chunk-size", "0"]) == 1
    assert [r.name for r in caplog.records if r.levelname == "ERROR"] == ["pageqa.scripts.ingest"]
