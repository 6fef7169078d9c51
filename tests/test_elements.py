import pytest
from mtlfile.elements import BumpMap, Color, Comment, Material, TextureMap, format_float
from mtlfile.exceptions import MissingRequiredName, UnwritableValue
from mtlfile.illumination import Illumination


class TestColor:
    def test_to_text(self):
        assert Color(0.8, 0.2, 0.1).to_text() == "0.8 0.2 0.1"

    def test_ints_render_as_floats(self):
        assert Color(1, 0, 0).to_text() == "1.0 0.0 0.0"

    def test_set_chains(self):
        color = Color()
        assert color.set(r=0.5).set(g=0.25, b=2.0) is color
        assert color == Color(0.5, 0.25, 2.0)


def test_format_float():
    assert format_float(0.1) == "0.1"
    assert format_float(3) == "3.0"
    assert float(format_float(1e-7)) == 1e-7


class TestComment:
    def test_to_text(self):
        assert Comment(text="hello  world").to_text() == "# hello  world"

    def test_without_text(self):
        assert Comment().to_text() == "#"

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank(self, text):
        assert Comment(text=text).is_blank()

    def test_trailing_whitespace_dropped(self):
        assert Comment(text="  note  ").to_text() == "#   note"

    def test_multiline_text_rejected(self):
        with pytest.raises(UnwritableValue):
            Comment(text="one\ntwo").to_text()


class TestTextureMap:
    def test_file_only(self):
        assert TextureMap(file="wood.png").to_text() == "wood.png"

    def test_option_order(self):
        texture = TextureMap(file="wood.png", transform=True, offset=2, scale=1)
        assert texture.to_text() == "-s 1.0 -o 2.0 -t wood.png"

    def test_transform_never_absent(self):
        texture = TextureMap(file="a.png").set(transform=True)
        texture.clear("transform")
        assert texture.transform is False

    def test_clear_optional(self):
        texture = TextureMap(file="a.png", scale=2.0, offset=1.0).clear("scale")
        assert texture.scale is None
        assert texture.offset == 1.0

    def test_file_cannot_be_cleared(self):
        with pytest.raises(AttributeError):
            TextureMap(file="a.png").clear("file")

    @pytest.mark.parametrize("file", ["-t", "-s x.png", "-o 1 x.png", "", "  ", "a  b.png", "a\tb.png"])
    def test_unreadable_file_rejected(self, file):
        with pytest.raises(UnwritableValue):
            TextureMap(file=file).to_text()

    def test_file_with_single_spaces(self):
        assert TextureMap(file="my texture.png", scale=2).to_text() == "-s 2.0 my texture.png"

    def test_bm_allowed_in_texture_file(self):
        assert TextureMap(file="-bm.png").to_text() == "-bm.png"


class TestBumpMap:
    def test_intensity_first(self):
        bump = BumpMap(file="n.png", scale=0.5, intensity=0.3, transform=True)
        assert bump.to_text() == "-bm 0.3 -s 0.5 -t n.png"

    def test_not_a_texture_map(self):
        assert not isinstance(BumpMap(file="n.png"), TextureMap)

    def test_file_starting_with_bm_rejected(self):
        with pytest.raises(UnwritableValue):
            BumpMap(file="-bm 0.3 n.png").to_text()


class TestMaterial:
    def test_name_only(self):
        assert Material(name="plain").to_text() == "newmtl plain\n"

    def test_full_block_order(self):
        material = Material(name="m").set(
            bump_map=BumpMap(file="b.png"),
            transparency_map=TextureMap(file="d.png"),
            specular_map=TextureMap(file="ks.png"),
            diffuse_map=TextureMap(file="kd.png"),
            ambient_map=TextureMap(file="ka.png"),
            specular_color=Color(0.3, 0.3, 0.3),
            diffuse_color=Color(0.2, 0.2, 0.2),
            ambient_color=Color(0.1, 0.1, 0.1),
            illumination=Illumination.REFLECTION_RAY_TRACE_ON,
            specular_exponent=10,
            transparency=0.5,
        )
        assert material.to_text() == (
            "newmtl m\n"
            "d 0.5\n"
            "Ns 10.0\n"
            "illum 3\n"
            "Ka 0.1 0.1 0.1\n"
            "Kd 0.2 0.2 0.2\n"
            "Ks 0.3 0.3 0.3\n"
            "map_Ka ka.png\n"
            "map_Kd kd.png\n"
            "map_Ks ks.png\n"
            "map_d d.png\n"
            "map_Bump b.png\n"
        )

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_name(self, name):
        with pytest.raises(MissingRequiredName):
            Material(name=name, transparency=0.5).to_text()

    @pytest.mark.parametrize("name", ["red brick", " brick", "brick\t"])
    def test_name_with_whitespace_rejected(self, name):
        with pytest.raises(UnwritableValue):
            Material(name=name).to_text()

    def test_missing_name_is_value_error(self):
        with pytest.raises(ValueError):
            Material().to_text()

    def test_unknown_field(self):
        with pytest.raises(AttributeError):
            Material().set(emissive=Color())

    def test_clear_fields(self):
        material = Material(name="m", transparency=0.5, diffuse_color=Color(1, 1, 1))
        assert material.clear("transparency", "diffuse_color") is material
        assert material.to_text() == "newmtl m\n"

    def test_owns_its_colors(self):
        a = Material(name="a", diffuse_color=Color(1, 0, 0))
        b = Material(name="b")
        assert b.diffuse_color is None
        assert a.diffuse_color is not b.diffuse_color
