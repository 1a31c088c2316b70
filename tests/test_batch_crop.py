import pytest
from PIL import Image as PILImage

from pngcrop.models.classification import ClassificationMode
from pngcrop.models.crop_result import CropStatus
from pngcrop.models.naming_policy import NamingPolicy
from pngcrop.pipeline.batch_crop import crop_files
from pngcrop.services.path_resolver import PathResolver
from .helpers import write_broken_png


def size_of(path):
    with PILImage.open(path) as img:
        return img.size


def test_failures_are_reported_and_do_not_stop_the_batch(write_image, two_dots, tmp_path, capsys):
    missing = tmp_path / "missing.png"
    good = write_image(two_dots, name="good.png")

    results = crop_files([missing, good], mode=ClassificationMode.ALPHA_ONLY,
                         show_progress=False)

    out = capsys.readouterr().out
    assert f"{missing} does not exist or is not a valid PNG: " in out
    assert [r.source for r in results] == [str(good)]
    assert size_of(good) == (2, 2)


def test_broken_file_does_not_stop_the_batch(write_image, two_dots, tmp_path, capsys):
    broken = write_broken_png(tmp_path / "broken.png")
    good = write_image(two_dots, name="good.png")

    results = crop_files([broken, good], mode=ClassificationMode.ALPHA_ONLY,
                         show_progress=False)

    out = capsys.readouterr().out
    assert f"{broken} does not exist or is not a valid PNG: broken PNG file" in out
    assert [r.source for r in results] == [str(good)]
    assert size_of(good) == (2, 2)


def test_explicit_output(write_image, two_dots, tmp_path):
    src = write_image(two_dots)
    dest = tmp_path / "dest.png"
    results = crop_files([src], explicit_output=dest, mode=ClassificationMode.ALPHA_ONLY,
                         show_progress=False)

    assert results[0].destination == str(dest)
    assert size_of(dest) == (2, 2)
    assert size_of(src) == (4, 4)


def test_explicit_output_needs_a_single_source(write_image, two_dots, tmp_path):
    a = write_image(two_dots, name="a.png")
    b = write_image(two_dots, name="b.png")
    with pytest.raises(ValueError):
        crop_files([a, b], explicit_output=tmp_path / "out.png", show_progress=False)
    assert size_of(a) == (4, 4)


def test_prefixed_outputs(write_image, two_dots, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_image(two_dots, name="a.png")
    write_image(two_dots, name="b.png")
    resolver = PathResolver(NamingPolicy.PREFIXED, prefix="cropped_")

    results = crop_files(["a.png", "b.png"], resolver=resolver,
                         mode=ClassificationMode.ALPHA_ONLY, show_progress=False)

    assert [r.destination for r in results] == ["cropped_a.png", "cropped_b.png"]
    assert size_of(tmp_path / "cropped_a.png") == (2, 2)
    assert size_of(tmp_path / "a.png") == (4, 4)


def test_directory_arguments_are_expanded(write_image, two_dots, framed_dot, tmp_path):
    write_image(two_dots, name="a.png")
    write_image(framed_dot, name="b.png")
    (tmp_path / "readme.txt").write_text("not an image")

    results = crop_files([tmp_path], mode=ClassificationMode.SAMPLE_BACKGROUND,
                         show_progress=False)

    assert [r.status for r in results] == [CropStatus.CROPPED, CropStatus.CROPPED]
    assert size_of(tmp_path / "a.png") == (2, 2)
    assert size_of(tmp_path / "b.png") == (1, 1)
