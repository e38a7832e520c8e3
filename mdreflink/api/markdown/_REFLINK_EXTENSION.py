"""marko extension that keeps links, definitions and front matter round-trippable."""

from marko.helpers import MarkoExtension

from .Definition import Definition
from .FrontMatter import FrontMatter
from .Link import Link

REFLINK_EXTENSION = MarkoExtension(elements=[Definition, FrontMatter, Link])
