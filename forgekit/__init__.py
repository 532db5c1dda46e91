"""forgekit - 智能合约构建工具的依赖与 fork 缓存解析"""

__version__ = "0.1.0"
