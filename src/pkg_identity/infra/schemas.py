from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..core.domain.metadata import (
	ApkMetadata,
	DepGroupMetadata,
	DpkgMetadata,
	JavaArchiveMetadata,
	PackageMetadata,
	RpmMetadata,
	SbomMetadata,
)
from ..core.domain.models import RawPackage, SourceCode


class DpkgMetadataSchema(BaseModel):
	"""Debian package database entry"""
	type: Literal["dpkg"]
	package_name: str = ""
	source_name: str = ""
	source_version: str = ""
	maintainer: str = ""
	architecture: str = ""
	os_id: str = ""
	os_version_codename: str = ""

	def to_domain(self) -> PackageMetadata:
		return DpkgMetadata(**self.model_dump(exclude={"type"}))


class ApkMetadataSchema(BaseModel):
	"""Alpine installed database entry"""
	type: Literal["apk"]
	package_name: str = ""
	origin_name: str = ""
	architecture: str = ""
	license: str = ""
	os_id: str = ""
	os_version_id: str = ""

	def to_domain(self) -> PackageMetadata:
		return ApkMetadata(**self.model_dump(exclude={"type"}))


class RpmMetadataSchema(BaseModel):
	"""RPM database entry"""
	type: Literal["rpm"]
	package_name: str = ""
	source_rpm: str = ""
	epoch: int = 0
	architecture: str = ""
	os_id: str = ""
	os_version_id: str = ""

	def to_domain(self) -> PackageMetadata:
		return RpmMetadata(**self.model_dump(exclude={"type"}))


class JavaArchiveMetadataSchema(BaseModel):
	"""Coordinates read from a jar's pom.properties or manifest"""
	type: Literal["java-archive"]
	group_id: str = ""
	artifact_id: str = ""
	sha1: str = ""

	def to_domain(self) -> PackageMetadata:
		return JavaArchiveMetadata(group_id=self.group_id, artifact_id=self.artifact_id, sha1=self.sha1)


class DepGroupMetadataSchema(BaseModel):
	"""Lockfile entry annotated with dependency groups"""
	type: Literal["depgroups"]
	dep_groups: list[str] = Field(default_factory=list)

	def to_domain(self) -> PackageMetadata:
		return DepGroupMetadata(groups=tuple(self.dep_groups))


class SbomMetadataSchema(BaseModel):
	"""Component identity recorded in an SPDX or CycloneDX document"""
	type: Literal["sbom"]
	purl: Optional[str] = None
	cpes: list[str] = Field(default_factory=list)

	def to_domain(self) -> PackageMetadata:
		return SbomMetadata(purl_string=self.purl or "", cpes=tuple(self.cpes))


MetadataSchema = Annotated[
	Union[
		DpkgMetadataSchema,
		ApkMetadataSchema,
		RpmMetadataSchema,
		JavaArchiveMetadataSchema,
		DepGroupMetadataSchema,
		SbomMetadataSchema,
	],
	Field(discriminator="type"),
]


class SourceCodeSchema(BaseModel):
	repo: Optional[str] = None
	commit: str = ""


class PackageRecordSchema(BaseModel):
	"""One package as reported by an extractor"""
	name: str
	version: str = ""
	ecosystem: str = ""
	locations: list[str] = Field(default_factory=list)
	source_code: Optional[SourceCodeSchema] = None
	metadata: Optional[MetadataSchema] = None
	plugins: list[str] = Field(default_factory=list)

	def to_domain(self) -> RawPackage:
		source_code = None
		if self.source_code is not None:
			source_code = SourceCode(repo=self.source_code.repo, commit=self.source_code.commit)
		return RawPackage(
			name=self.name,
			version=self.version,
			ecosystem=self.ecosystem,
			locations=tuple(self.locations),
			source_code=source_code,
			metadata=self.metadata.to_domain() if self.metadata is not None else None,
			plugins=tuple(self.plugins),
		)


class InventoryDocument(BaseModel):
	"""Top-level inventory file"""
	packages: list[PackageRecordSchema] = Field(default_factory=list)


class OsvPackage(BaseModel):
	"""Affected package identity as published by OSV"""
	ecosystem: str
	name: str
	purl: Optional[str] = None


class OsvAffected(BaseModel):
	package: OsvPackage
	versions: Optional[list[str]] = None
	ecosystem_specific: Optional[dict[str, Any]] = None
	database_specific: Optional[dict[str, Any]] = None


class OsvVulnerability(BaseModel):
	"""Vulnerability record matched against a package"""
	schema_version: Optional[str] = None
	id: str
	modified: Optional[str] = None
	published: Optional[str] = None
	aliases: Optional[list[str]] = None
	summary: Optional[str] = None
	details: Optional[str] = None
	affected: list[OsvAffected] | None = None
