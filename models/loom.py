"""Pydantic models for Loom GraphQL responses.

Loom answers ``fetchVideoTranscript`` and ``getVideo`` with GraphQL
union types.  Each member carries a ``__typename`` tag, which is used
here as the discriminator, so an unexpected variant fails validation
instead of being half-read.

Comment models keep the upstream field names as aliases.  Dumping them
with ``by_alias=True`` reproduces the shape Loom returned.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class LoomModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# fetchVideoTranscript


class TranscriptDetails(LoomModel):
    """The ``VideoTranscriptDetails`` variant of a transcript lookup.

    Only ``captions_source_url`` is read; the other fields are kept as
    returned, whatever their type.
    """

    typename: Literal["VideoTranscriptDetails"] = Field(alias="__typename")
    id: Optional[Any] = None
    video_id: Optional[Any] = None
    s3_id: Optional[Any] = None
    version: Optional[Any] = None
    transcript_url: Optional[Any] = None
    captions_url: Optional[Any] = None
    processing_service: Optional[Any] = None
    transcription_status: Optional[Any] = None
    processing_start_time: Optional[Any] = None
    processing_end_time: Optional[Any] = None
    created_at: Optional[Any] = Field(default=None, alias="createdAt")
    updated_at: Optional[Any] = Field(default=None, alias="updatedAt")
    source_url: Optional[Any] = None
    captions_source_url: Optional[str] = None
    filler_words: Optional[Any] = None
    filler_word_removal: Optional[Any] = None


class GenericError(LoomModel):
    typename: Literal["GenericError"] = Field(alias="__typename")
    message: Optional[str] = None


TranscriptResult = Annotated[
    Union[TranscriptDetails, GenericError], Field(discriminator="typename")
]
transcript_result_adapter: TypeAdapter = TypeAdapter(TranscriptResult)


# ---------------------------------------------------------------------------
# getVideo (metadata)


class RegularUserVideo(LoomModel):
    typename: Literal["RegularUserVideo"] = Field(alias="__typename")
    id: Optional[Any] = None
    name: Optional[str] = None
    description: Optional[str] = None


class PrivateVideo(LoomModel):
    """A video whose details are hidden from anonymous callers."""

    typename: Literal["PrivateVideo"] = Field(alias="__typename")
    id: Optional[Any] = None


class CMSUserVideo(LoomModel):
    typename: Literal["CMSUserVideo"] = Field(alias="__typename")
    id: Optional[Any] = None
    name: Optional[str] = None
    description: Optional[str] = None


VideoResult = Annotated[
    Union[RegularUserVideo, PrivateVideo, CMSUserVideo],
    Field(discriminator="typename"),
]
video_result_adapter: TypeAdapter = TypeAdapter(VideoResult)


class VideoMetadata(LoomModel):
    title: str
    description: Optional[str] = None

    @classmethod
    def from_video(cls, video: Union[RegularUserVideo, PrivateVideo, CMSUserVideo]) -> Optional["VideoMetadata"]:
        """Build metadata from a ``getVideo`` variant.

        Returns ``None`` for variants without a name, which is what Loom
        sends for private videos.
        """
        if isinstance(video, PrivateVideo):
            return None
        if isinstance(video, (RegularUserVideo, CMSUserVideo)):
            if not video.name:
                return None
            return cls(title=video.name, description=video.description or None)
        raise TypeError(f"Unhandled video variant: {type(video).__name__}")


# ---------------------------------------------------------------------------
# getVideo (comments)


class Avatar(LoomModel):
    name: Optional[str] = None
    thumbnail_url: Optional[str] = Field(default=None, alias="thumb")
    is_special_badge: Optional[bool] = Field(default=None, alias="isAtlassianMastered")


class CommentBase(LoomModel):
    id: str
    content: Optional[str] = None
    plain_content: Optional[str] = Field(default=None, alias="plainContent")
    time_stamp: Optional[Union[int, float]] = None
    user_name: Optional[str] = None
    avatar: Optional[Avatar] = None
    edited: Optional[bool] = None
    user_id: Optional[str] = None
    anon_user_id: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    is_chat_message: Optional[bool] = Field(default=None, alias="isChatMessage")


class CommentReply(CommentBase):
    """A reply to a top-level comment.  Replies never nest further."""

    comment_post_id: Optional[str] = None
    extended_reaction: Optional[str] = None


class Comment(CommentBase):
    deleted_at: Optional[str] = Field(default=None, alias="deletedAt")
    children_comments: List[CommentReply] = Field(default_factory=list)


class CommentedVideo(LoomModel):
    """The ``RegularUserVideo`` variant as selected by the comment query."""

    typename: Literal["RegularUserVideo"] = Field(alias="__typename")
    id: Optional[Any] = None
    video_meeting_platform: Optional[str] = Field(default=None, alias="videoMeetingPlatform")
    video_comments: Optional[List[Comment]] = None


class UncommentedVideo(LoomModel):
    """Video variants for which the comment query selects no fields."""

    typename: Literal["PrivateVideo", "CMSUserVideo"] = Field(alias="__typename")


CommentsVideoResult = Annotated[
    Union[CommentedVideo, UncommentedVideo], Field(discriminator="typename")
]
comments_video_adapter: TypeAdapter = TypeAdapter(CommentsVideoResult)

comment_list_adapter: TypeAdapter = TypeAdapter(List[Comment])


def dump_comments(comments: List[Comment]) -> str:
    """Serialise a comment tree as indented JSON with upstream field names."""
    return comment_list_adapter.dump_json(comments, by_alias=True, indent=2).decode("utf-8")
