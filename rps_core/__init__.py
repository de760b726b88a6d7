"""
rps_core

动作模块运行所需的核心部件：
- 执行上下文 `context`
- 动作/函数注册表 `registry`
- 表达式求值 `expression`
- YAML 配置 `config`
"""
