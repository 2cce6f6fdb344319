from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "OK",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，默认200表示成功
        msg: 响应消息

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def error_response(
    msg: str = "Request failed",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: 错误状态码，默认400表示客户端错误
        data: 可选的错误详情数据

    返回:
        Dict[str, Any]: 标准格式的错误响应
    """
    return standard_response(data=data, code=code, msg=msg)


def not_found_response(entity: str = "Resource", entity_id: Any = None) -> Dict[str, Any]:
    """
    创建资源未找到响应

    参数:
        entity: 未找到的实体类型名称
        entity_id: 未找到的实体ID

    返回:
        Dict[str, Any]: 标准格式的404响应
    """
    data = {"id": entity_id} if entity_id is not None else None
    return error_response(msg=f"{entity} not found", code=404, data=data)


def bad_request_response(
    msg: str = "Bad request",
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建请求参数错误响应

    返回:
        Dict[str, Any]: 标准格式的400响应
    """
    return error_response(msg=msg, code=400, data=data)
