"""默认配置常量"""

ENV_PREFIX = "SUBNET_TOPO_"

# 输出
OUTPUT_FORMAT_DEFAULT = "json"
OUTPUT_FORMATS = ("json", "yaml")

# 日志
VERBOSE_DEFAULT = False
JSON_LOGS_DEFAULT = False

# 上下文查询
CONTEXT_FILE_DEFAULT = "network.context.json"
