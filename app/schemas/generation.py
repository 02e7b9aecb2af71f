from pydantic import BaseModel, Field
from typing import Optional, List
from app.generators.xrm_gen.types import AttributeDescriptor, AttributeTypeCode, EntityDescriptor

class AttributeModel(BaseModel):
    logical_name: str = Field(..., min_length=1, examples=["parentaccountid"])
    attribute_type: Optional[str] = Field(None, examples=["Lookup"])
    is_primary_id: bool = False

    def to_descriptor(self) -> AttributeDescriptor:
        return AttributeDescriptor(
            logical_name=self.logical_name,
            attribute_type=AttributeTypeCode.parse(self.attribute_type),
            is_primary_id=self.is_primary_id,
        )

class EntityModel(BaseModel):
    logical_name: str = Field(..., min_length=1, examples=["account"])
    schema_name: Optional[str] = Field(None, examples=["Account"])
    primary_id_attribute: str = Field(..., min_length=1, examples=["accountid"])
    collection_name: Optional[str] = Field(None, examples=["accounts"])
    attributes: List[AttributeModel] = []

    def to_descriptor(self) -> EntityDescriptor:
        return EntityDescriptor(
            logical_name=self.logical_name,
            schema_name=self.schema_name or "",
            primary_id_attribute=self.primary_id_attribute,
            attributes=tuple(a.to_descriptor() for a in self.attributes),
            collection_name=self.collection_name,
        )

class GenerateRequest(BaseModel):
    entities: List[EntityModel]
    template: Optional[str] = None
    namespace: Optional[str] = None

class GenerateResponse(BaseModel):
    typescript: str
    csharp: str
    entity_count: int
