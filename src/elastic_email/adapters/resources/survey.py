"""Recurso `survey`."""

from __future__ import annotations

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import CompressionFormat, ExportFileFormats
from elastic_email.core.domain.models import (
    ExportLink,
    Survey,
    SurveyResultInfo,
    SurveyResultsSummaryInfo,
)


class SurveyResource(ApiResource):
    async def add(self, survey: Survey) -> Survey:
        return await self._post("/survey/add", FormParams().add_json("survey", survey), Survey)

    async def delete(self, public_survey_id: str) -> None:
        await self._post("/survey/delete", FormParams().add("publicSurveyID", public_survey_id))

    async def export(
        self,
        public_survey_id: str,
        file_name: str,
        *,
        file_format: ExportFileFormats | None = None,
        compression_format: CompressionFormat | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add("publicSurveyID", public_survey_id)
            .add("fileName", file_name)
            .add("fileFormat", file_format)
            .add("compressionFormat", compression_format)
        )
        return await self._post("/survey/export", params, ExportLink)

    async def list(self) -> list[Survey]:
        return await self._post("/survey/list", FormParams(), list[Survey]) or []

    async def load_response_list(self, public_survey_id: str) -> list[SurveyResultInfo]:
        params = FormParams().add("publicSurveyID", public_survey_id)
        return await self._post("/survey/loadresponselist", params, list[SurveyResultInfo]) or []

    async def load_results(self, public_survey_id: str) -> SurveyResultsSummaryInfo:
        params = FormParams().add("publicSurveyID", public_survey_id)
        return await self._post("/survey/loadresults", params, SurveyResultsSummaryInfo)

    async def update(self, survey: Survey) -> Survey:
        return await self._post("/survey/update", FormParams().add_json("survey", survey), Survey)
