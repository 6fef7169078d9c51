from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from mtlfile.elements import Comment, Material


@dataclass
class Library:
    """
    The contents of one .mtl file: comments and materials, both kept in the
    order they were added.
    """
    comments: list[Comment] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)

    @classmethod
    def from_text(cls, source) -> "Library":
        """
        Build a Library from MTL text or an iterable of lines.
        """
        from mtlfile.parser import parse
        return parse(source, cls())

    def add_comment(self, comment: Comment) -> "Library":
        self.comments.append(comment)
        return self

    def remove_comment(self, comment: Union[int, Comment]) -> "Library":
        if isinstance(comment, int):
            del self.comments[comment]
        else:
            self.comments.remove(comment)
        return self

    def clear_comments(self) -> "Library":
        self.comments.clear()
        return self

    def add_material(self, material: Material) -> "Library":
        self.materials.append(material)
        return self

    def remove_material(self, material: Union[int, Material]) -> "Library":
        if isinstance(material, int):
            del self.materials[material]
        else:
            self.materials.remove(material)
        return self

    def clear_materials(self) -> "Library":
        self.materials.clear()
        return self

    def get_material(self, name: str) -> Optional[Material]:
        """
        Return the first material called `name`, or None.
        Names are not required to be unique.
        """
        for material in self.materials:
            if material.name == name:
                return material
        return None

    def material_names(self) -> list[Optional[str]]:
        return [m.name for m in self.materials]

    def to_text(self) -> str:
        out = []
        # blank comments are not written
        comments = [c for c in self.comments if not c.is_blank()]
        if comments:
            for comment in comments:
                out.append(comment.to_text() + "\n")
            out.append("\n")
        for material in self.materials:
            out.append(material.to_text() + "\n")
        return "".join(out)

    def __len__(self):
        return len(self.materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    def __contains__(self, name) -> bool:
        return self.get_material(name) is not None
