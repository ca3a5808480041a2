#!python3
"""パッケージ情報の問い合わせサービス."""
from control_file_loader import ControlFileLoader
from deb_control_parser import DebControlParser
from dependency_resolver import (
    DependencyQueryResult,
    DependencyResolver,
    PackageIndexBuilder,
)
from loggingex import generate_logger

logger = generate_logger(name=__name__, debug=__debug__, filepath=__file__)

DEFAULT_SOURCE = "/var/lib/dpkg/status"


class PackageInfoService:
    """コントロールファイルからパッケージ名と詳細情報を取得するサービス.

    問い合わせのたびにファイルを読み直すため、結果は常に現在の
    ファイル内容を反映する.
    """

    def __init__(self, source: str = DEFAULT_SOURCE, loader=None):
        self._source = source
        self._loader = loader or ControlFileLoader()
        self._parser = DebControlParser()
        self._index_builder = PackageIndexBuilder(self._parser)
        self._resolver = DependencyResolver()

    @property
    def source(self) -> str:
        """問い合わせ対象のパスまたはURL."""
        return self._source

    def get_package_names(self) -> list:
        """全パッケージ名をファイル順で返す.

        重複やソートは行わない.

        Returns
        -------
        list
            パッケージ名のリスト.

        Raises
        ------
        FileAccessError
            コントロールファイルが読めない場合に発生.
        """
        names = []
        for paragraph in self._read_paragraphs():
            name = self._parser.extract_name(
                self._parser.split_lines(paragraph))
            if name:
                names.append(name)
        logger.info("[names] %d packages in %s", len(names), self._source)
        return names

    def get_info_for(self, package_name: str) -> DependencyQueryResult:
        """パッケージの詳細情報（説明・依存関係・被依存関係）を返す.

        Parameters
        ----------
        package_name : str
            問い合わせるパッケージ名.

        Returns
        -------
        DependencyQueryResult
            詳細情報. 存在しない名前の場合は空の項目を持つ.

        Raises
        ------
        FileAccessError
            コントロールファイルが読めない場合に発生.
        """
        index = self._index_builder.build(self._read_paragraphs(),
                                          package_name)
        result = self._resolver.resolve(index)
        if package_name not in index.all_names:
            logger.info("[packages] %s not found in %s", package_name,
                        self._source)
        logger.debug("[packages] %s: %d depends, %d dependents", package_name,
                     len(result.depends), len(result.dependents))
        return result

    def _read_paragraphs(self) -> list:
        text = self._loader.load(self._source)
        paragraphs = self._parser.split_paragraphs(text)
        logger.debug("read %d paragraphs from %s", len(paragraphs),
                     self._source)
        return paragraphs
