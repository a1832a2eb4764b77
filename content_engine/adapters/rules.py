from content_engine.rules.models import Rules


class RulesAdapter:
    """Serves the component rules ports from a loaded Rules document."""

    def __init__(self, rules: Rules) -> None:
        self.rules = rules

    # blocks
    def get_block_id_prefix(self) -> str:
        return self.rules.blocks.id_prefix

    # validation
    def get_max_blocks_per_page(self) -> int:
        return self.rules.blocks.max_blocks_per_page

    def get_warn_on_duplicate_ids(self) -> bool:
        return self.rules.validation.warn_on_duplicate_ids

    # render
    def get_escape_html(self) -> bool:
        return self.rules.render.escape_html

    def get_fragment_separator(self) -> str:
        return self.rules.render.fragment_separator

    def get_forbidden_protocols(self) -> list[str]:
        return list(self.rules.render.forbidden_protocols)

    # content
    def get_slug_pattern(self) -> str:
        return self.rules.content.slug.pattern

    def get_slug_min_length(self) -> int:
        return self.rules.content.slug.min

    def get_slug_max_length(self) -> int:
        return self.rules.content.slug.max

    def get_title_min_length(self) -> int:
        return self.rules.content.title.min

    def get_title_max_length(self) -> int:
        return self.rules.content.title.max

    def get_require_valid_content_to_publish(self) -> bool:
        return self.rules.content.require_valid_content_to_publish

    def get_block_publish_if_missing_media(self) -> bool:
        return self.rules.content.block_publish_if_missing_media
