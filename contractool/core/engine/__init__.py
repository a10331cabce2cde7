"""contractool.core.engine: Contractの読み込み・検証・設定"""
