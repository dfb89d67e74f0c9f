"""assettagger: content-hash fingerprinting of static assets for cache-busting.

Copies each style sheet and script into an output directory under a name
that embeds its content digest, then removes the originals:

    site.css      ->  site.<sha256>.min.css
    app.min.js    ->  app.<sha256>.min.js
"""

__version__ = "0.1.0"
__description__ = "Content-hash fingerprinting of static style sheets and scripts"

from assettagger.core.batch import FileTagger
from assettagger.core.versioner import FileVersioner
from assettagger.cli.app import app as cli

__all__ = ["FileTagger", "FileVersioner", "cli", "__version__"]
