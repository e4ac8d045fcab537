"""
AppSettings - Typed settings dataclass cho loctok.

Thay the Dict[str, Any] bang dataclass co type hints, validation va default values.
Tat ca settings duoc truy cap qua typed fields thay vi string keys.

Modules:
- AppSettings: Dataclass chua toan bo default options cua CLI
- from_dict(): Tao AppSettings tu dict (doc tu settings.json)
- to_dict(): Chuyen doi AppSettings thanh dict de luu xuong file
- to_scan_options(): Tao ScanOptions cho core scanner

Su dung:
    settings = load_app_settings()
    options = settings.to_scan_options()
"""

import typing
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from config.encoding_config import DEFAULT_CLI_ENCODING

if TYPE_CHECKING:
    from core.tokenization.types import ScanOptions


OUTPUT_FORMATS = ("table", "json", "tree")


@dataclass
class AppSettings:
    """
    Typed settings cho loctok CLI.

    Moi field tuong ung voi mot key trong settings.json.
    Default values duoc su dung khi settings.json chua co key tuong ung.
    CLI flags luon override cac gia tri nay.
    """

    # --- Tokenizer ---
    # Ten tiktoken encoding (vd: "o200k_base", "cl100k_base")
    encoding: str = DEFAULT_CLI_ENCODING

    # --- File Filter Settings ---
    # Co scan dotfiles hay khong
    include_hidden: bool = False
    # Extension allow-list, comma separated (vd: "rs,py"). Rong = tat ca
    extensions: str = ""
    # Pattern cac file/folder bi loai them (separated by newline, gitignore format)
    excluded_patterns: str = ""
    # Co respect .gitignore / global gitignore / .git/info/exclude hay khong
    use_gitignore: bool = True
    # Co dung danh sach ignore mac dinh (node_modules, dist, ...) hay khong
    use_default_ignores: bool = False

    # --- Output Settings ---
    # Hien thi progress tren stderr
    show_progress: bool = True
    # Output format: "table", "json" hoac "tree"
    output_format: str = "table"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppSettings":
        """
        Tao AppSettings tu dict, chi lay cac keys trung voi field names.

        Bao gom type validation: neu value co type khong khop voi
        field declaration, se bo qua va dung default thay the.

        Args:
            data: Dict settings (thuong tu settings.json)

        Returns:
            AppSettings instance voi values tu dict, fallback ve defaults
        """
        field_types: dict[str, Any] = {f.name: f.type for f in fields(cls)}

        filtered: dict[str, Any] = {}
        for key, value in data.items():
            if key not in field_types:
                continue

            expected_type = field_types[key]

            # Xu ly truong hop type annotation la string (forward ref)
            if isinstance(expected_type, str):
                type_map = {"str": str, "bool": bool, "int": int, "float": float}
                expected_type = type_map.get(expected_type, str)

            # isinstance(True, int) == True, nhung bool khong phai int hop le
            if expected_type is int and isinstance(value, bool):
                continue

            origin = typing.get_origin(expected_type)
            check_type = origin if origin is not None else expected_type

            if isinstance(value, check_type):
                filtered[key] = value

        # output_format ngoai danh sach -> dung default
        if filtered.get("output_format") not in (None, *OUTPUT_FORMATS):
            filtered.pop("output_format")

        return cls(**filtered)

    def to_dict(self) -> dict[str, Any]:
        """
        Chuyen doi AppSettings thanh dict de luu xuong file.

        Returns:
            Dict voi toan bo settings
        """
        return {
            "encoding": self.encoding,
            "include_hidden": self.include_hidden,
            "extensions": self.extensions,
            "excluded_patterns": self.excluded_patterns,
            "use_gitignore": self.use_gitignore,
            "use_default_ignores": self.use_default_ignores,
            "show_progress": self.show_progress,
            "output_format": self.output_format,
        }

    def get_excluded_patterns_list(self) -> list[str]:
        """
        Parse excluded_patterns string thanh list cac patterns.

        Loai bo dong trong va comments (bat dau bang #).

        Returns:
            List patterns da normalize
        """
        return [
            line.strip()
            for line in self.excluded_patterns.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]

    def to_scan_options(self) -> "ScanOptions":
        """
        Tao ScanOptions (immutable) cho mot lan scan tu settings hien tai.

        Returns:
            ScanOptions tuong ung
        """
        from core.tokenization.types import ScanOptions

        return ScanOptions(
            encoding=self.encoding,
            include_hidden=self.include_hidden,
            include_exts=ScanOptions.parse_extensions(self.extensions),
            excluded_patterns=tuple(self.get_excluded_patterns_list()),
            use_gitignore=self.use_gitignore,
            use_default_ignores=self.use_default_ignores,
        )
