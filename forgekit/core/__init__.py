"""核心解析逻辑：依赖描述、fork 存储缓存、合约定位符"""
