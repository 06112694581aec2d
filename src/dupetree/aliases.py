from dupetree.core.models import WindowMode, UniqueBy

WINDOW_MODE_ALIASES = {
    "prefix": WindowMode.PREFIX,
    "suffix": WindowMode.SUFFIX,
    "proportional": WindowMode.PROPORTIONAL,
    "whole": WindowMode.WHOLE,
}

WINDOW_MODE_CHOICES = list(WINDOW_MODE_ALIASES.keys())

WINDOW_MODE_HELP_TEXT = (
    "Part of each same-size file that is hashed:\n"
    "  prefix       : First N bytes (default, fastest)\n"
    "  suffix       : Last N bytes\n"
    "  proportional : First --fraction of the file length\n"
    "  whole        : Entire file (slowest, no sampling risk)\n"
    "Example:\n"
    "  %(prog)s -i ~/Downloads --window suffix -w 8K"
)

ALGORITHM_CHOICES = ["md5", "sha1", "sha256", "xxh64", "xxh128"]

ALGORITHM_HELP_TEXT = (
    "Digest used for window fingerprints. Default: md5\n"
    "  md5, sha1, sha256 : hashlib digests\n"
    "  xxh64, xxh128     : xxHash (non-cryptographic, fastest)"
)

UNIQUE_BY_ALIASES = {
    "size": UniqueBy.SIZE,
    "hash": UniqueBy.HASH,
}

UNIQUE_BY_CHOICES = list(UNIQUE_BY_ALIASES.keys())

UNIQUE_BY_HELP_TEXT = (
    "Meaning of 'unique' for --report unique and --copy-to:\n"
    "  size : no other file has the same length (default)\n"
    "  hash : every file except confirmed duplicates (one copy of each content)"
)

EPILOG_TEXT = """
Examples:
  Basic usage - list duplicate files in Downloads folder
  %(prog)s -i ~/Downloads

  Hash the last 8KB of same-size files with SHA-256
  %(prog)s -i ~/Downloads --window suffix -w 8K -a sha256

  List unique files instead of duplicates
  %(prog)s -i ~/Downloads --report unique

  Copy one file per distinct content to a backup folder
  %(prog)s -i ~/Photos --unique-by hash --copy-to /mnt/backup/photos

  Find copies of a single file
  %(prog)s -i ~/Documents --find ~/Downloads/report.pdf
"""
