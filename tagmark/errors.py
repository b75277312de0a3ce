class TagNameError(ValueError):
    pass


class EmptyTagNameError(TagNameError):
    def __init__(self) -> None:
        super().__init__('tag name is empty')


class WhitespaceTagNameError(TagNameError):
    def __init__(self, name: str) -> None:
        super().__init__(f'tag name has whitespace characters: {name!r}')
        self.name = name
