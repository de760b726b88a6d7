"""
文档获取辅助模块

提供统一的接口，从 ActionRegistry 获取动作模块的文档信息，
并可以拼成一份完整的 markdown 模块说明。
"""

from typing import Dict, List, Optional

from rps_basic.action_docs import get_action_doc_metadata
from rps_core.registry import ActionRegistry


class ActionDocInfo:
    """动作文档信息"""

    def __init__(self, name: str, chinese_name: str, doc: str, params_table: str):
        """
        初始化动作文档信息。

        Args:
            name: 动词
            chinese_name: 中文名称
            doc: 详细文档（markdown格式）
            params_table: 参数列表表格（markdown格式）
        """
        self.name = name
        self.chinese_name = chinese_name
        self.doc = doc
        self.params_table = params_table

    def to_dict(self) -> Dict[str, str]:
        """转换为字典格式，便于JSON序列化"""
        return {
            "name": self.name,
            "chinese_name": self.chinese_name,
            "doc": self.doc,
            "params_table": self.params_table,
        }


class DocHelper:
    """
    文档获取辅助类

    所有方法都是静态方法，数据来源于 ActionRegistry。
    """

    @staticmethod
    def get_action_list(module: str) -> List[str]:
        """获取模块下所有已注册的动词（如 ["abs", "as", "assign", ...]）。"""
        return ActionRegistry.list_actions(module)

    @staticmethod
    def get_action_doc(module: str, verb: str) -> Optional[ActionDocInfo]:
        """
        获取指定动作的文档信息。

        Returns:
            ActionDocInfo 对象；动作不存在或没有文档元数据时返回 None
        """
        handler = ActionRegistry.get_action(module, verb)
        if handler is None:
            return None

        # 按动词查找优先（as/assign 共用一个处理函数），再退回处理函数上的属性
        doc_metadata = get_action_doc_metadata(verb) or getattr(handler, "__doc_metadata__", None)
        if not doc_metadata:
            return None

        return ActionDocInfo(
            name=doc_metadata.get("name", verb),
            chinese_name=doc_metadata.get("chinese_name", verb),
            doc=doc_metadata.get("doc", ""),
            params_table=doc_metadata.get("params_table", ""),
        )

    @staticmethod
    def get_all_action_docs(module: str) -> Dict[str, ActionDocInfo]:
        """获取模块下所有动作的文档信息，键为动词。"""
        result = {}
        for verb in DocHelper.get_action_list(module):
            doc_info = DocHelper.get_action_doc(module, verb)
            if doc_info:
                result[verb] = doc_info
        return result

    @staticmethod
    def render_module_markdown(module: str) -> str:
        """把模块描述和全部动作文档拼成一份 markdown。"""
        parts = [f"# {module}", "", ActionRegistry.get_module_description(module) or ""]
        for doc_info in DocHelper.get_all_action_docs(module).values():
            parts.append(doc_info.doc.strip().replace("# ", "## ", 1))
            if doc_info.params_table.strip():
                parts.append(doc_info.params_table.strip())
        return "\n\n".join(parts) + "\n"
