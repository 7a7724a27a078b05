import numpy
import PIL.Image
import pytest
import stl.mesh
from pytest import approx

import cubefractal
import cubefractal.rendering
import cubefractal.rendering.image
import cubefractal.rendering.stats
import cubefractal.rendering.stl_renderer

import data


@pytest.fixture(scope="module")
def menger1():
    return cubefractal.regenerate(cubefractal.configure("menger", 1))


def test_stl_export(menger1, tmp_path):
    filename = str(tmp_path / "sponge.stl")
    cubefractal.rendering.stl_renderer.render_stl(menger1, filename)

    loaded = stl.mesh.Mesh.from_file(filename)
    assert len(loaded.vectors) == menger1.triangle_count
    assert loaded.vectors == approx(menger1.triangles())

    volume, _, _ = loaded.get_mass_properties()
    assert volume == approx(menger1.volume(), rel=1e-4)


def test_stl_mesh_normals_point_outwards():
    box = cubefractal.util.Box((0, 0, 0), 2)
    exported = cubefractal.rendering.stl_renderer.stl_mesh(cubefractal.accumulate([box]))

    centroids = exported.vectors.mean(axis=1)
    assert ((exported.normals * centroids).sum(axis=1) > 0).all()


def test_stl_mesh_empty():
    exported = cubefractal.rendering.stl_renderer.stl_mesh(cubefractal.accumulate([]))
    assert len(exported.vectors) == 0


def test_image(menger1, tmp_path):
    filename = str(tmp_path / "sponge.png")
    cubefractal.rendering.image.render_image(menger1, filename, size=(320, 240))

    image = PIL.Image.open(filename)
    assert image.size == (320, 240)

    pixels = numpy.asarray(image.convert("RGB"))
    assert pixels.max() > 0, "Some part of the sponge must be visible on the black background"


def test_image_empty_mesh():
    image = cubefractal.rendering.image.render_pil_image(cubefractal.accumulate([]), size=(64, 48))
    assert image.size == (64, 48)


def test_face_colors_shaded():
    triangles = cubefractal.accumulate([cubefractal.util.Box((0, 0, 0), 1)]).triangles()
    colors = cubefractal.rendering.image.face_colors(triangles)

    assert colors.shape == (12, 3)
    assert colors.min() >= 0
    assert colors.max() <= 1
    assert len({tuple(c) for c in colors.round(6).tolist()}) > 1


def test_stats(menger1, capsys):
    cubefractal.rendering.stats.render_stats(menger1)
    out = capsys.readouterr().out

    assert "boxes: 20" in out
    assert "triangles: 240" in out
    assert "vertices: 160" in out


def test_stats_empty(tmp_path):
    filename = tmp_path / "stats.txt"
    cubefractal.rendering.stats.render_stats(cubefractal.accumulate([]), str(filename))

    text = filename.read_text()
    assert "boxes: 0" in text
    assert "bounding box: empty" in text


def test_commandline_stl(tmp_path):
    filename = tmp_path / "out.stl"
    mesh = cubefractal.commandline_render(argv=["--depth", "1", "-o", str(filename)])

    assert mesh.box_count == 20
    assert len(stl.mesh.Mesh.from_file(str(filename)).vectors) == 240


def test_commandline_overrides_config(capsys):
    config = cubefractal.configure("menger", 3)
    mesh = cubefractal.commandline_render(config, argv=["--rule", "jeruzalem", "-d", "1", "-r", "stats"])

    assert mesh.box_count == len(cubefractal.JERUZALEM.offsets())
    assert "boxes: {}".format(mesh.box_count) in capsys.readouterr().out


def test_commandline_config_defaults(capsys):
    config = cubefractal.configure("menger", 1, invert=True)
    mesh = cubefractal.commandline_render(config, default_renderer="stats", argv=[])

    assert mesh.box_count == 7


def test_commandline_size_and_seed(capsys):
    argv = ["-d", "2", "--randomize", "--seed", "3", "--size", "9", "-r", "stats"]
    mesh1 = cubefractal.commandline_render(argv=argv)
    mesh2 = cubefractal.commandline_render(argv=argv)

    assert mesh1.boxes == mesh2.boxes
    assert mesh1.bounding_box().size().max() <= 9


def test_commandline_image(tmp_path):
    filename = tmp_path / "out.png"
    cubefractal.commandline_render(cross_config(), argv=["-o", str(filename)])

    assert PIL.Image.open(str(filename)).size == (1024, 768)


def test_commandline_unknown_extension(tmp_path):
    with pytest.raises(SystemExit):
        cubefractal.commandline_render(argv=["-o", str(tmp_path / "out.unknown")])


def test_commandline_unknown_rule():
    with pytest.raises(SystemExit):
        cubefractal.commandline_render(argv=["--rule", "koch"])


def cross_config():
    return cubefractal.configure(data.cross, 1)
