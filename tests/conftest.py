import pytest
from pathlib import Path


SAMPLE_MTL = """# Blender MTL File: 'scene.blend'
# Material Count: 2

newmtl brick
Ns 96.078431
Ka 1.0 1.0 1.0
Kd 0.64 0.2 0.1
Ks 0.5 0.5 0.5
d 1.0
illum 2
map_Kd -s 2.0 brick_diffuse.png
map_Bump -bm 0.3 brick_normal.png

newmtl glass
Tr 0.25
illum 4
Ks 0.9 0.9 0.9
map_d -o 0.5 -t glass_alpha.png
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_MTL


@pytest.fixture
def sample_file(tmp_path) -> Path:
    """Writes the sample library to disk and returns its path."""
    path = tmp_path / "scene.mtl"
    path.write_text(SAMPLE_MTL)
    return path
