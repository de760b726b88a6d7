"""
rps_utils

通用工具：日志 `logger`、动作文档 `doc_helper`。
"""
