"""
Store Call Executor

ブロッキングなドライバ呼び出しを実行するプロセス共有のスレッドプール。
asyncio.run が終了時に待機するデフォルト executor とは別に持つため、
期限切れで放棄した呼び出しが Lambda の応答を止めない。
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

store_executor = ThreadPoolExecutor(max_workers=8, thread_name_prefix="recipe-store")
