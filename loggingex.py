#! python3
"""loggingの拡張."""
import atexit
import json
import os
import sys
from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    Formatter,
    Logger,
    StreamHandler,
    getLogger,
)
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pathlibex import get_data_dir

DEFAULT_CONFIG_PATH = "loggingex_config.json"

LOG_LEVELS = {
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARNING": WARNING,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
}

# ログ出力先ディレクトリ（データディレクトリ配下のlog）
_log_config = {"log_dir": get_data_dir() / "log"}


def set_log_directory(log_dir=None) -> None:
    """
    ログ出力先ディレクトリを設定.

    未指定の場合はデータディレクトリ配下のlogディレクトリに設定します。

    Parameters
    ----------
    log_dir : str or Path, optional
        ログ出力先ディレクトリ. The default is None.

    Returns
    -------
    None.
    """
    if log_dir is None:
        log_dir = get_data_dir() / "log"
    _log_config["log_dir"] = Path(log_dir)


def cleanup_logger(logger: Logger) -> None:
    """
    loggerハンドラのクリーンアップ.

    Parameters
    ----------
    logger : Logger
        ロガー.

    Returns
    -------
    None.

    """
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def generate_log_formatter() -> Formatter:
    """
    Formatter生成.

    Returns
    -------
    Formatter
        Formatterのインスタンス.

    """
    return Formatter(" - ".join([
        " %(asctime)s",
        "%(filename)s:%(lineno)d",
        "%(funcName)s",
        "%(levelname)s",
        "%(message)s",
    ]))


def generate_log_filepath(filepath: str) -> str:
    """
    ログファイルパス生成.

    Parameters
    ----------
    filepath : str
        スクリプトのファイルパス.

    Returns
    -------
    str
        ログファイルのパス.

    """
    log_filename = ".".join(
        [os.path.splitext(os.path.basename(filepath))[0], "log"])
    return str(_log_config["log_dir"] / log_filename)


def generate_logger(
    name: str,
    debug: bool,
    filepath: str,
    config_path: str = DEFAULT_CONFIG_PATH,
) -> Logger:
    """
    Logger生成.

    Parameters
    ----------
    name : str
        呼び出し元の __name__ .
    debug : bool
        呼び出し元の __debug__ .
    filepath : str
        呼び出し元の __file__.
    config_path : str, optional
        ログ設定ファイルのパス, by default DEFAULT_CONFIG_PATH.

    Returns
    -------
    Logger
        Loggerのインスタンス.
    """
    ret = getLogger(name)
    if ret.handlers:
        # 同一モジュールの再読み込み時はハンドラを重複させない
        return ret
    fmt = generate_log_formatter()

    # 設定ファイルからログレベルと有効状態を取得
    module_config = {}
    try:
        config = load_logging_config(config_path)
        module_config = config.get(name, {})
        log_level_str = module_config.get("level", "INFO").upper()
        log_level = LOG_LEVELS.get(log_level_str, INFO)
        enabled = module_config.get("enabled", True)
        enabled_filehandler = module_config.get("enabled_filehandler", True)
    except (OSError, json.JSONDecodeError) as e:
        log_level = INFO
        enabled = True
        enabled_filehandler = True
        print(f"ログ設定の読み込みに失敗しました: {e}")

    # ログが無効化されている場合はロガーごと無効化
    if not enabled:
        ret.disabled = True
        return ret

    # ログレベルを設定
    ret.setLevel(DEBUG if debug else log_level)

    if enabled_filehandler:
        try:
            _log_config["log_dir"].mkdir(parents=True, exist_ok=True)
            filehandler = RotatingFileHandler(
                filename=generate_log_filepath(filepath),
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8")
        except OSError as e:
            # 書き込めない環境ではストリーム出力のみ
            print(f"ログファイルを開けませんでした: {e}", file=sys.stderr)
        else:
            filehandler.setFormatter(fmt)
            filehandler.setLevel(log_level)
            ret.addHandler(filehandler)

    # ストリームハンドラー
    streamhandler = StreamHandler()
    streamhandler.setFormatter(fmt)
    streamhandler.setStream(stream=sys.stdout)
    streamhandler.setLevel(log_level)
    ret.addHandler(streamhandler)

    atexit.register(cleanup_logger, ret)
    return ret


def set_init_logfile(config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """
    初期化ログファイル設定.

    設定で有効なログファイルは空にし、無効なものは削除します。

    Parameters
    ----------
    config_path : str, optional
        ログ設定ファイルのパス, by default DEFAULT_CONFIG_PATH.

    Returns
    -------
    None
        なし.

    """
    config = load_logging_config(config_path)
    for key, value in config.items():
        logfilename = generate_log_filepath(key)
        if not os.path.exists(logfilename):
            continue
        if value.get("enabled", True) and value.get("enabled_filehandler",
                                                    True):
            with open(logfilename, "w", encoding="utf-8") as f:
                f.write("")
            continue
        os.remove(logfilename)


def load_logging_config(config_path: str) -> dict:
    """
    ログ設定をJSONファイルから読み込む。

    Parameters
    ----------
    config_path : str
        設定ファイルのパス。

    Returns
    -------
    dict
        ログ設定の辞書。
    """
    if not os.path.exists(config_path):
        # 設定ファイルが存在しない場合は空の辞書を返す
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)
