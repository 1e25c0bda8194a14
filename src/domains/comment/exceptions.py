from core.exception.exceptions import ForbiddenException, InvalidArgumentException, NotFoundException


class CommentNotFoundException(NotFoundException):
    def __init__(self, detail: str = "댓글을 찾을 수 없습니다."):
        super().__init__(detail=detail, code="COMMENT_NOT_FOUND")


class CommentPermissionException(ForbiddenException):
    def __init__(self, detail: str = "댓글 작성자 또는 관리자만 삭제할 수 있습니다."):
        super().__init__(detail=detail, code="COMMENT_FORBIDDEN")


class InvalidParentCommentException(InvalidArgumentException):
    def __init__(self, detail: str = "부모 댓글이 같은 레시피에 존재하지 않습니다."):
        super().__init__(detail=detail, code="INVALID_PARENT_COMMENT")
