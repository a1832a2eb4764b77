from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str = "content-engine"
    rules_version: str = "1"

class RangeRule(BaseModel):
    min: int
    max: int

class RegexRule(RangeRule):
    pattern: str

class BlocksRules(BaseModel):
    id_prefix: str = "block"
    max_blocks_per_page: int = 200

class RenderRules(BaseModel):
    escape_html: bool = True
    fragment_separator: str = "\n"
    forbidden_protocols: list[str] = Field(
        default_factory=lambda: ["javascript:", "data:", "vbscript:"]
    )

class ValidationRules(BaseModel):
    warn_on_duplicate_ids: bool = True

class ContentRules(BaseModel):
    slug: RegexRule = Field(
        default_factory=lambda: RegexRule(
            min=1, max=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
        )
    )
    title: RangeRule = Field(default_factory=lambda: RangeRule(min=1, max=200))
    require_valid_content_to_publish: bool = True
    block_publish_if_missing_media: bool = True

class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    blocks: BlocksRules = Field(default_factory=BlocksRules)
    render: RenderRules = Field(default_factory=RenderRules)
    validation: ValidationRules = Field(default_factory=ValidationRules)
    content: ContentRules = Field(default_factory=ContentRules)
