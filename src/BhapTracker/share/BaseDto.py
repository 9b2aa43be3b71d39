from humps import camelize
from pydantic import BaseModel, ConfigDict


class BaseDto(BaseModel):
    """
    所有 DTO 的基类，统一配置。
    - 支持从 ORM 对象直接构造。
    - 以驼峰别名导出，供页面模板使用: dto.model_dump(by_alias=True)
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=camelize,
        validate_by_name=True,
        validate_by_alias=True,
    )
