"""
请求处理过程中的错误类型。

str(exc) 即为返回给调用方的消息；工具路径在分发边界包装为
"Error: <message>"，提示词路径直接向传输层抛出。
"""


class GuidelinesError(Exception):
    """所有可预期的请求错误的基类"""
    pass


class UnknownToolError(GuidelinesError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownPromptError(GuidelinesError):
    def __init__(self, name: str):
        super().__init__(f"Unknown prompt: {name}")
        self.name = name


class InvalidArgumentError(GuidelinesError):
    """缺少必填参数，或参数值超出其类型 / 枚举范围"""
    pass


class NotFoundError(InvalidArgumentError):
    """键的形式合法但不在封闭目录中；在边界上按 InvalidArgument 处理"""
    pass
