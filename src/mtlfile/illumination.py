from enum import IntEnum

from mtlfile.exceptions import IlluminationOutOfRange


class Illumination(IntEnum):
    """
    Illumination models of the MTL format. The value is what gets written
    after `illum`; the description is for display only.
    """

    def __new__(cls, value: int, description: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    COLOR_ON_AMBIENT_OFF = 0, "Color on and Ambient off"
    COLOR_ON_AMBIENT_ON = 1, "Color on and Ambient on"
    HIGHLIGHT_ON = 2, "Highlight on"
    REFLECTION_RAY_TRACE_ON = 3, "Reflection on and Ray trace on"
    GLASS_RAY_TRACE_ON = 4, "Transparency: Glass on; Reflection: Ray trace on"
    FRESNEL_RAY_TRACE_ON = 5, "Reflection: Fresnel on and Ray trace on"
    REFRACTION_FRESNEL_OFF_RAY_TRACE_ON = 6, "Transparency: Refraction on; Reflection: Fresnel off and Ray trace on"
    REFRACTION_FRESNEL_ON_RAY_TRACE_ON = 7, "Transparency: Refraction on; Reflection: Fresnel on and Ray trace on"
    REFLECTION_RAY_TRACE_OFF = 8, "Reflection on and Ray trace off"
    GLASS_RAY_TRACE_OFF = 9, "Transparency: Glass on; Reflection: Ray trace off"
    INVISIBLE_SURFACE_SHADOWS = 10, "Casts shadows onto invisible surfaces"

    @classmethod
    def from_index(cls, index: int) -> "Illumination":
        try:
            return cls(index)
        except ValueError:
            raise IlluminationOutOfRange(
                f"illumination model {index} is not in range 0-{len(cls) - 1}"
            ) from None
