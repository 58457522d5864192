import pytest

from aviary.core.exceptions import UploadRejectedError
from aviary.services.uploads import ImageUploadBatch, new_image_batch

IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif")
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def batch():
    return ImageUploadBatch(max_images=4, allowed_types=IMAGE_TYPES, max_bytes=1024)


def test_fifth_image_is_refused(batch):
    for i in range(4):
        batch.add(f"{i}.png", "image/png", PNG)
    assert batch.limit_reached
    with pytest.raises(UploadRejectedError) as exc:
        batch.add("extra.png", "image/png", PNG)
    assert exc.value.status_code == 413
    assert len(batch) == 4


def test_non_image_is_refused(batch):
    with pytest.raises(UploadRejectedError) as exc:
        batch.add("notes.pdf", "application/pdf", b"%PDF-1.4")
    assert exc.value.status_code == 415
    assert len(batch) == 0


def test_oversized_and_empty_files_are_refused(batch):
    with pytest.raises(UploadRejectedError):
        batch.add("big.jpg", "image/jpeg", b"x" * 2048)
    with pytest.raises(UploadRejectedError):
        batch.add("empty.gif", "image/gif", b"")


def test_extend_stops_at_first_refusal(batch):
    files = [
        ("a.png", "image/png", PNG),
        ("b.txt", "text/plain", b"hi"),
        ("c.png", "image/png", PNG),
    ]
    with pytest.raises(UploadRejectedError):
        batch.extend(files)
    assert [img.filename for img in batch.images] == ["a.png"]


def test_remove_and_clear_free_slots(batch):
    added = [batch.add(f"{i}.gif", "image/gif", b"GIF89a") for i in range(4)]
    assert batch.remove(added[1].id) is True
    assert batch.remove("missing") is False
    assert not batch.limit_reached
    batch.add("again.gif", "image/gif", b"GIF89a")

    batch.clear()
    assert len(batch) == 0


def test_write_to_stores_files_and_returns_urls(batch, tmp_path):
    batch.add("photo.jpeg", "image/jpeg", b"\xff\xd8\xff")
    batch.add("pic.png", "image/png", PNG)

    urls = batch.write_to(tmp_path / "uploads")

    assert len(urls) == 2
    assert urls[0].startswith("/uploads/") and urls[0].endswith(".jpg")
    assert urls[1].endswith(".png")
    stored = tmp_path / "uploads" / urls[1].rsplit("/", 1)[1]
    assert stored.read_bytes() == PNG


def test_new_image_batch_uses_settings_and_capacity():
    assert new_image_batch().max_images == 4
    assert new_image_batch(capacity=1).max_images == 1
    assert new_image_batch(capacity=10).max_images == 4
    assert "image/gif" in new_image_batch().allowed_types
