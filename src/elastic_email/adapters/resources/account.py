"""Recurso `account`: cuenta principal, sub-cuentas y perfil."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import SendingPermission
from elastic_email.core.domain.models import (
    Account,
    AccountOverview,
    AdvancedOptions,
    Payment,
    Profile,
    ReputationDetail,
    SubAccount,
)


class AccountResource(ApiResource):
    async def add_sub_account(
        self,
        email: str,
        password: str,
        confirm_password: str,
        *,
        requires_email_credits: bool | None = None,
        max_contacts: int | None = None,
        enable_private_ip_request: bool | None = None,
        send_activation: bool | None = None,
        return_url: str | None = None,
        sending_permission: SendingPermission | None = None,
        enable_contact_features: bool | None = None,
        pool_name: str | None = None,
        email_size_limit: int | None = None,
        daily_send_limit: int | None = None,
    ) -> str:
        """Crea una sub-cuenta y devuelve su API key."""

        params = (
            FormParams()
            .add("email", email)
            .add("password", password)
            .add("confirmPassword", confirm_password)
            .add("requiresEmailCredits", requires_email_credits)
            .add("maxContacts", max_contacts)
            .add("enablePrivateIPRequest", enable_private_ip_request)
            .add("sendActivation", send_activation)
            .add("returnUrl", return_url)
            .add("sendingPermission", sending_permission)
            .add("enableContactFeatures", enable_contact_features)
            .add("poolName", pool_name)
            .add("emailSizeLimit", email_size_limit)
            .add("dailySendLimit", daily_send_limit)
        )
        return await self._post("/account/addsubaccount", params, str)

    async def add_sub_account_credits(
        self,
        credits: int,
        *,
        notes: str | None = None,
        sub_account_email: str | None = None,
        public_account_id: str | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("credits", credits)
            .add("notes", notes)
            .add("subAccountEmail", sub_account_email)
            .add("publicAccountID", public_account_id)
        )
        await self._post("/account/addsubaccountcredits", params)

    async def change_email(
        self,
        new_email: str,
        *,
        redirect_url: str | None = None,
        source_url: str | None = None,
    ) -> str:
        params = (
            FormParams()
            .add("newEmail", new_email)
            .add("redirectUrl", redirect_url)
            .add("sourceUrl", source_url)
        )
        return await self._post("/account/changeemail", params, str)

    async def change_password(
        self,
        new_password: str,
        confirm_password: str,
        *,
        current_password: str | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("newPassword", new_password)
            .add("confirmPassword", confirm_password)
            .add("currentPassword", current_password)
        )
        await self._post("/account/changepassword", params)

    async def delete_sub_account(
        self,
        *,
        sub_account_email: str | None = None,
        public_account_id: str | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("subAccountEmail", sub_account_email)
            .add("publicAccountID", public_account_id)
        )
        await self._post("/account/deletesubaccount", params)

    async def get_account_ability_to_send_email(self) -> str:
        """Texto del servidor indicando si la cuenta puede enviar."""

        return await self._post("/account/getaccountabilitytosendemail", FormParams(), str)

    async def get_sub_account_api_key(
        self,
        *,
        sub_account_email: str | None = None,
        public_account_id: str | None = None,
    ) -> str:
        params = (
            FormParams()
            .add("subAccountEmail", sub_account_email)
            .add("publicAccountID", public_account_id)
        )
        return await self._post("/account/getsubaccountapikey", params, str)

    async def get_sub_account_list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[SubAccount]:
        params = FormParams().add("limit", limit).add("offset", offset)
        return await self._post("/account/getsubaccountlist", params, list[SubAccount]) or []

    async def load(self) -> Account:
        return await self._post("/account/load", FormParams(), Account)

    async def load_advanced_options(self) -> AdvancedOptions:
        return await self._post("/account/loadadvancedoptions", FormParams(), AdvancedOptions)

    async def load_payment_history(
        self,
        limit: int,
        offset: int,
        from_date: datetime,
        to_date: datetime,
    ) -> list[Payment]:
        params = (
            FormParams()
            .add("limit", limit)
            .add("offset", offset)
            .add("fromDate", from_date)
            .add("toDate", to_date)
        )
        return await self._post("/account/loadpaymenthistory", params, list[Payment]) or []

    async def load_reputation_details(self) -> ReputationDetail:
        return await self._post("/account/loadreputationdetails", FormParams(), ReputationDetail)

    async def overview(self) -> AccountOverview:
        return await self._post("/account/overview", FormParams(), AccountOverview)

    async def profile_overview(self) -> Profile:
        return await self._post("/account/profileoverview", FormParams(), Profile)

    async def remove_sub_account_credits(
        self,
        *,
        credits: Decimal | int | None = None,
        notes: str | None = None,
        sub_account_email: str | None = None,
        public_account_id: str | None = None,
        remove_all: bool | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("credits", credits)
            .add("notes", notes)
            .add("subAccountEmail", sub_account_email)
            .add("publicAccountID", public_account_id)
            .add("removeAll", remove_all)
        )
        await self._post("/account/removesubaccountcredits", params)

    async def update_advanced_options(
        self,
        *,
        enable_clicks_tracking: bool | None = None,
        enable_link_click_tracking: bool | None = None,
        manage_subscriptions: bool | None = None,
        manage_subscribed_only: bool | None = None,
        transactional_on_unsubscribe: bool | None = None,
        skip_list_unsubscribe: bool | None = None,
        auto_text_from_html: bool | None = None,
        allow_custom_headers: bool | None = None,
        bcc_email: str | None = None,
        email_notification_for_error: bool | None = None,
        email_notification_email: str | None = None,
        webhook_notification_url: str | None = None,
        notify_once_per_email: bool | None = None,
        enable_template_scripting: bool | None = None,
        logo_url: str | None = None,
    ) -> AdvancedOptions:
        params = (
            FormParams()
            .add("enableClicksTracking", enable_clicks_tracking)
            .add("enableLinkClickTracking", enable_link_click_tracking)
            .add("manageSubscriptions", manage_subscriptions)
            .add("manageSubscribedOnly", manage_subscribed_only)
            .add("transactionalOnUnsubscribe", transactional_on_unsubscribe)
            .add("skipListUnsubscribe", skip_list_unsubscribe)
            .add("autoTextFromHtml", auto_text_from_html)
            .add("allowCustomHeaders", allow_custom_headers)
            .add("bccEmail", bcc_email)
            .add("emailNotificationForError", email_notification_for_error)
            .add("emailNotificationEmail", email_notification_email)
            .add("webhookNotificationUrl", webhook_notification_url)
            .add("notifyOncePerEmail", notify_once_per_email)
            .add("enableTemplateScripting", enable_template_scripting)
            .add("logoUrl", logo_url)
        )
        return await self._post("/account/updateadvancedoptions", params, AdvancedOptions)

    async def update_http_notification(
        self,
        url: str,
        *,
        notify_once_per_email: bool | None = None,
        settings: str | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("url", url)
            .add("notifyOncePerEmail", notify_once_per_email)
            .add("settings", settings)
        )
        await self._post("/account/updatehttpnotification", params)

    async def update_profile(
        self,
        first_name: str,
        last_name: str,
        address1: str,
        city: str,
        state: str,
        zip_code: str,
        country_id: int,
        *,
        marketing_consent: bool | None = None,
        address2: str | None = None,
        company: str | None = None,
        website: str | None = None,
        logo_url: str | None = None,
        tax_code: str | None = None,
        phone: str | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("firstName", first_name)
            .add("lastName", last_name)
            .add("address1", address1)
            .add("city", city)
            .add("state", state)
            .add("zip", zip_code)
            .add("countryID", country_id)
            .add("marketingConsent", marketing_consent)
            .add("address2", address2)
            .add("company", company)
            .add("website", website)
            .add("logoUrl", logo_url)
            .add("taxCode", tax_code)
            .add("phone", phone)
        )
        await self._post("/account/updateprofile", params)
