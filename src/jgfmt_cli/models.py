from dataclasses import dataclass

from jgfmt.models import Language


@dataclass(frozen=True)
class FormatOptions:
    """Command-line switches that steer a formatting run"""

    backup: bool = False
    java_only: bool = False
    groovy_only: bool = False

    @property
    def java_enabled(self) -> bool:
        return not self.groovy_only

    @property
    def groovy_enabled(self) -> bool:
        return not self.java_only

    def enabled(self, language: Language) -> bool:
        if language is Language.JAVA:
            return self.java_enabled
        return self.groovy_enabled
