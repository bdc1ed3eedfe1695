"""Module: vets."""

from xml.etree import ElementTree

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SpecialtyOut(CamelModel):
    id: int
    name: str


class VetOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    specialties: list[SpecialtyOut] = Field(default_factory=list)
    nr_of_specialties: int = 0


# Wrapper document for the vet resource: {"vetList": [...]} / <vets><vetList>...</vetList></vets>.
class VetsOut(CamelModel):
    vet_list: list[VetOut] = Field(default_factory=list)

    def to_xml(self) -> bytes:
        root = ElementTree.Element("vets")
        for vet in self.model_dump(by_alias=True)["vetList"]:
            _append_fields(ElementTree.SubElement(root, "vetList"), vet)
        return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def _append_fields(parent: ElementTree.Element, data: dict) -> None:
    # Lists repeat their element name once per item, as in the JSON array.
    for key, value in data.items():
        if isinstance(value, list):
            for item in value:
                _append_fields(ElementTree.SubElement(parent, key), item)
        else:
            ElementTree.SubElement(parent, key).text = str(value)
