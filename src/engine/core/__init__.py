"""
どこで: `engine.core` サブパッケージ。
何を: 点列（PointSequence）の検証・生成、変換種別、モデル頂点コンテナを提供。
"""
