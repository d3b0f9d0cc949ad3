import pytest

from pageqa.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        openai_base_url="http://inference.test/v1",
        chroma_dir=str(tmp_path / "chroma"),
        chroma_collection="test_chunks",
        retrieve_top_k=3,
    )
