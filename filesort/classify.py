"""File classification: extension → ExtensionId → Category."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ExtensionId(Enum):
    # Text
    TXT = "txt"
    MD = "md"
    RTF = "rtf"
    LOG = "log"
    JSON = "json"
    XML = "xml"
    YAML = "yaml"
    TOML = "toml"
    INI = "ini"
    # Documents
    PDF = "pdf"
    DOC = "doc"
    DOCX = "docx"
    XLS = "xls"
    XLSX = "xlsx"
    PPT = "ppt"
    PPTX = "pptx"
    ODT = "odt"
    ODS = "ods"
    ODP = "odp"
    # Images
    JPG = "jpg"
    PNG = "png"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"
    WEBP = "webp"
    SVG = "svg"
    ICO = "ico"
    PSD = "psd"
    AI = "ai"
    EPS = "eps"
    RAW = "raw"
    # Audio
    MP3 = "mp3"
    WAV = "wav"
    OGG = "ogg"
    FLAC = "flac"
    AAC = "aac"
    M4A = "m4a"
    WMA = "wma"
    AMR = "amr"
    MIDI = "midi"
    # Video
    MP4 = "mp4"
    MKV = "mkv"
    AVI = "avi"
    MOV = "mov"
    WMV = "wmv"
    FLV = "flv"
    WEBM = "webm"
    MPEG = "mpeg"
    M4V = "m4v"
    # Archives
    ZIP = "zip"
    RAR = "rar"
    TAR = "tar"
    GZ = "gz"
    BZ2 = "bz2"
    SEVEN_Z = "7z"
    DMG = "dmg"
    XZ = "xz"
    LZ = "lz"
    CAB = "cab"
    # Executables
    EXE = "exe"
    SH = "sh"
    BAT = "bat"
    CMD = "cmd"
    APPIMAGE = "appimage"
    JAR = "jar"
    BIN = "bin"
    RUN = "run"
    MSI = "msi"
    ELF = "elf"
    # Code
    RS = "rs"
    C = "c"
    H = "h"
    CPP = "cpp"
    HPP = "hpp"
    JAVA = "java"
    JS = "js"
    TS = "ts"
    PY = "py"
    SWIFT = "swift"
    GO = "go"
    RB = "rb"
    LUA = "lua"
    KOTLIN = "kotlin"
    DART = "dart"
    CS = "cs"
    SCALA = "scala"
    HASKELL = "haskell"
    LISP = "lisp"
    R = "r"
    JULIA = "julia"
    TCL = "tcl"
    PERL = "perl"
    # Web
    HTML = "html"
    CSS = "css"
    JSX = "jsx"
    TSX = "tsx"
    PHP = "php"
    ASP = "asp"
    ASPX = "aspx"
    # Databases
    SQL = "sql"
    SQLITE = "sqlite"
    MDB = "mdb"
    ACCDB = "accdb"
    JSONDB = "jsondb"
    # VM and disk images
    VMDK = "vmdk"
    VDI = "vdi"
    VHD = "vhd"
    VHDX = "vhdx"
    QCOW2 = "qcow2"
    # Fonts
    TTF = "ttf"
    OTF = "otf"
    WOFF = "woff"
    WOFF2 = "woff2"
    EOT = "eot"
    # 3D models
    OBJ = "obj"
    FBX = "fbx"
    STL = "stl"
    BLEND = "blend"
    GLB = "glb"
    GLTF = "gltf"
    PLY = "ply"
    # Scientific data
    CSV = "csv"
    MAT = "mat"
    HDF5 = "hdf5"
    NC = "nc"
    DCM = "dcm"
    FITS = "fits"
    # Configuration and system
    CONF = "conf"
    REG = "reg"
    INF = "inf"
    SYS = "sys"
    DLL = "dll"
    DAT = "dat"
    DB = "db"
    # Games
    SAVE = "save"
    PAK = "pak"
    VPK = "vpk"
    WAD = "wad"
    ROM = "rom"
    ISO = "iso"
    NSO = "nso"
    # Blockchain and crypto
    WALLET = "wallet"
    KEY = "key"
    JSONKEY = "jsonkey"
    PEM = "pem"
    P12 = "p12"

    UNKNOWN = ""


class Category(Enum):
    """Report categories, in display order."""

    TEXT = "Text Files"
    DOCUMENT = "Document Files"
    IMAGE = "Image Files"
    AUDIO = "Audio Files"
    VIDEO = "Video Files"
    ARCHIVE = "Archive Files"
    EXECUTABLE = "Executable Files"
    CODE = "Code Files"
    WEB = "Web Files"
    DATABASE = "Database Files"
    DISK_IMAGE = "Virtual Machine & Disk Images"
    FONT = "Font Files"
    MODEL_3D = "3D Model Files"
    SCIENTIFIC = "Scientific Data"
    SYSTEM = "Configuration and System Files"
    GAME = "Game Files"
    CRYPTO = "Blockchain & Crypto"
    OTHERS = "Others"


def _ids(names: str) -> frozenset[ExtensionId]:
    return frozenset(ExtensionId(name) for name in names.split())


CATEGORY_MEMBERS: dict[Category, frozenset[ExtensionId]] = {
    Category.TEXT: _ids("txt md rtf log json xml yaml toml ini"),
    Category.DOCUMENT: _ids("pdf doc docx xls xlsx ppt pptx odt ods odp"),
    Category.IMAGE: _ids("jpg png gif bmp tiff webp svg ico psd ai eps raw"),
    Category.AUDIO: _ids("mp3 wav ogg flac aac m4a wma amr midi"),
    Category.VIDEO: _ids("mp4 mkv avi mov wmv flv webm mpeg m4v"),
    Category.ARCHIVE: _ids("zip rar tar gz bz2 7z dmg xz lz cab"),
    Category.EXECUTABLE: _ids("exe sh bat cmd appimage jar bin run msi elf"),
    Category.CODE: _ids(
        "rs c h cpp hpp java js ts py swift go rb lua kotlin dart cs scala"
        " haskell lisp r julia tcl perl"
    ),
    Category.WEB: _ids("html css jsx tsx php asp aspx"),
    Category.DATABASE: _ids("sql sqlite mdb accdb jsondb"),
    Category.DISK_IMAGE: _ids("vmdk vdi vhd vhdx qcow2"),
    Category.FONT: _ids("ttf otf woff woff2 eot"),
    Category.MODEL_3D: _ids("obj fbx stl blend glb gltf ply"),
    Category.SCIENTIFIC: _ids("csv mat hdf5 nc dcm fits"),
    Category.SYSTEM: _ids("conf reg inf sys dll dat db"),
    Category.GAME: _ids("save pak vpk wad rom iso nso"),
    Category.CRYPTO: _ids("wallet key jsonkey pem p12"),
    Category.OTHERS: frozenset([ExtensionId.UNKNOWN]),
}

# Alternate spellings → canonical member
_ALIASES: dict[str, ExtensionId] = {
    "jpeg": ExtensionId.JPG,
    "yml": ExtensionId.YAML,
    "tif": ExtensionId.TIFF,
    "mpg": ExtensionId.MPEG,
    "mid": ExtensionId.MIDI,
    "htm": ExtensionId.HTML,
    "kt": ExtensionId.KOTLIN,
    "kts": ExtensionId.KOTLIN,
    "hs": ExtensionId.HASKELL,
    "lsp": ExtensionId.LISP,
    "jl": ExtensionId.JULIA,
    "pl": ExtensionId.PERL,
    "pm": ExtensionId.PERL,
}


def _build_category_index() -> dict[ExtensionId, Category]:
    """Invert CATEGORY_MEMBERS, refusing gaps and overlaps."""
    index: dict[ExtensionId, Category] = {}
    for category, members in CATEGORY_MEMBERS.items():
        for ext_id in members:
            if ext_id in index:
                raise RuntimeError(
                    f"{ext_id.name} is listed under both {index[ext_id].value!r} "
                    f"and {category.value!r}"
                )
            index[ext_id] = category
    missing = [ext_id.name for ext_id in ExtensionId if ext_id not in index]
    if missing:
        raise RuntimeError(f"no category for: {', '.join(missing)}")
    return index


_CATEGORY_OF: dict[ExtensionId, Category] = _build_category_index()

_LOOKUP: dict[str, ExtensionId] = {
    ext_id.value: ext_id for ext_id in ExtensionId if ext_id is not ExtensionId.UNKNOWN
}
_LOOKUP.update(_ALIASES)


def classify(extension: str) -> ExtensionId:
    """Map an extension (no leading dot, any case) to its ExtensionId."""
    return _LOOKUP.get(extension.lower(), ExtensionId.UNKNOWN)


def category_of(ext_id: ExtensionId) -> Category:
    return _CATEGORY_OF[ext_id]


def split_extension(filename: str) -> Optional[str]:
    """
    Return the lowercase text after the final dot, or None when there is none.
    A dot in position 0 (".gitignore") does not start an extension.
    """
    dot_idx = filename.rfind(".")
    if dot_idx <= 0:
        return None
    return filename[dot_idx + 1:].lower()


def classify_file(filename: str) -> Category:
    ext = split_extension(filename)
    if ext is None:
        return Category.OTHERS
    return category_of(classify(ext))


def aliases_for(ext_id: ExtensionId) -> list[str]:
    return sorted(alias for alias, target in _ALIASES.items() if target is ext_id)
